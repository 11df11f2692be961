"""Excel timetable generator."""

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .constants import MAX_PERIOD, MIN_PERIOD, WEEK_DAYS, get_slot_time_range
from .models import Day, OptimizationResult, ScheduleEntry
from .reporting import teacher_load_frame

TEACHER_LOAD_SHEET = "Teacher Load"
SUGGESTIONS_SHEET = "Suggestions"

# Column widths
PERIOD_COLUMN_WIDTH = 8.0
TIME_COLUMN_WIDTH = 14.0
DAY_COLUMN_WIDTH = 26.0

# Layout: title row, blank row, header row, then one row per period
TITLE_ROW = 1
HEADER_ROW = 3
FIRST_PERIOD_ROW = 4

# Fonts
FONT_TITLE = Font(name="Calibri", size=14, bold=True)
FONT_HEADER = Font(name="Calibri", size=11, bold=True)
FONT_CELL = Font(name="Calibri", size=10, bold=False)

# Alignments
ALIGN_CENTER = Alignment(horizontal="center", vertical="center", wrap_text=True)
ALIGN_LEFT = Alignment(horizontal="left", vertical="center", wrap_text=True)

# Borders
THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)

HEADER_FILL = PatternFill(start_color="DDEBF7", end_color="DDEBF7", fill_type="solid")


def sanitize_sheet_name(name: str) -> str:
    """Sanitize sheet name by removing invalid characters.

    Excel sheet names cannot contain: / \\ * ? : [ ]

    Args:
        name: Original sheet name.

    Returns:
        Sanitized sheet name (max 31 chars).
    """
    invalid_chars = r"/\*?:[]"
    for char in invalid_chars:
        name = name.replace(char, "")
    return name[:31] or "Sheet"


def format_entry_cell(entry: ScheduleEntry) -> str:
    """Cell text for one entry: subject, teacher and room on separate lines."""
    lines = [entry.subject_name, entry.teacher_name]
    if entry.room_name:
        lines.append(entry.room_name)
    return "\n".join(lines)


class TimetableExcelGenerator:
    """Writes an optimization result to an Excel workbook.

    One sheet per class (periods as rows, weekdays as columns), followed by
    a teacher load sheet and a suggestions sheet.
    """

    def __init__(self, result: OptimizationResult):
        self.result = result

    def group_by_class(self) -> dict[str, list[ScheduleEntry]]:
        """Group entries by class name, classes in first-seen order."""
        classes: dict[str, list[ScheduleEntry]] = {}
        for entry in self.result.schedule:
            classes.setdefault(entry.class_name, []).append(entry)
        return classes

    @staticmethod
    def build_grid(entries: list[ScheduleEntry]) -> dict[Day, dict[int, list[ScheduleEntry]]]:
        """Build {day: {period: [entries]}} for one class."""
        grid: dict[Day, dict[int, list[ScheduleEntry]]] = {
            day: {period: [] for period in range(MIN_PERIOD, MAX_PERIOD + 1)}
            for day in WEEK_DAYS
        }
        for entry in entries:
            if entry.day in grid and entry.period in grid[entry.day]:
                grid[entry.day][entry.period].append(entry)
        return grid

    def write_class_sheet(self, ws: Worksheet, class_name: str, entries: list[ScheduleEntry]) -> None:
        """Fill one worksheet with a class timetable."""
        last_column = get_column_letter(2 + len(WEEK_DAYS))
        ws.merge_cells(f"A{TITLE_ROW}:{last_column}{TITLE_ROW}")
        title = ws.cell(row=TITLE_ROW, column=1, value=f"Timetable: {class_name}")
        title.font = FONT_TITLE
        title.alignment = ALIGN_CENTER

        headers = ["Period", "Time"] + [day.value for day in WEEK_DAYS]
        for col, header in enumerate(headers, start=1):
            cell = ws.cell(row=HEADER_ROW, column=col, value=header)
            cell.font = FONT_HEADER
            cell.alignment = ALIGN_CENTER
            cell.border = THIN_BORDER
            cell.fill = HEADER_FILL

        grid = self.build_grid(entries)
        for offset, period in enumerate(range(MIN_PERIOD, MAX_PERIOD + 1)):
            row = FIRST_PERIOD_ROW + offset
            ws.cell(row=row, column=1, value=period)
            ws.cell(row=row, column=2, value=get_slot_time_range(period))
            for col, day in enumerate(WEEK_DAYS, start=3):
                cell_entries = grid[day][period]
                text = "\n\n".join(format_entry_cell(e) for e in cell_entries)
                ws.cell(row=row, column=col, value=text or None)
            for col in range(1, len(headers) + 1):
                cell = ws.cell(row=row, column=col)
                cell.font = FONT_CELL
                cell.alignment = ALIGN_CENTER
                cell.border = THIN_BORDER

        ws.column_dimensions["A"].width = PERIOD_COLUMN_WIDTH
        ws.column_dimensions["B"].width = TIME_COLUMN_WIDTH
        for col in range(3, len(headers) + 1):
            ws.column_dimensions[get_column_letter(col)].width = DAY_COLUMN_WIDTH

    def write_teacher_load_sheet(self, ws: Worksheet) -> None:
        """Fill the teacher load sheet from the reporting frame."""
        frame = teacher_load_frame(self.result.schedule)
        headers = ["Teacher"] + list(frame.columns) + ["Total"]
        for col, header in enumerate(headers, start=1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = FONT_HEADER
            cell.border = THIN_BORDER
            cell.fill = HEADER_FILL

        for row, (teacher, counts) in enumerate(frame.iterrows(), start=2):
            values = [str(teacher)] + [int(v) for v in counts] + [int(counts.sum())]
            for col, value in enumerate(values, start=1):
                cell = ws.cell(row=row, column=col, value=value)
                cell.font = FONT_CELL
                cell.border = THIN_BORDER

        ws.column_dimensions["A"].width = DAY_COLUMN_WIDTH

    def write_suggestions_sheet(self, ws: Worksheet) -> None:
        """Fill the suggestions sheet with score, constraints and shortfalls."""
        ws.cell(row=1, column=1, value="Score").font = FONT_HEADER
        ws.cell(row=1, column=2, value=self.result.score)

        row = 3
        sections = [
            ("Violated constraints", self.result.violated_constraints),
            ("Satisfied constraints", self.result.satisfied_constraints),
            ("Suggestions", self.result.suggestions),
        ]
        for header, items in sections:
            ws.cell(row=row, column=1, value=header).font = FONT_HEADER
            row += 1
            for item in items:
                ws.cell(row=row, column=1, value=item).alignment = ALIGN_LEFT
                row += 1
            row += 1

        ws.column_dimensions["A"].width = 90.0

    def generate(self, output_path: Path) -> Path:
        """Generate the workbook.

        Args:
            output_path: Path for the .xlsx file.

        Returns:
            Path to the written file.
        """
        wb = Workbook()
        wb.remove(wb.active)

        used_names: set[str] = set()
        for class_name, entries in self.group_by_class().items():
            sheet_name = sanitize_sheet_name(class_name)
            suffix = 2
            base_name = sheet_name
            while sheet_name in used_names or sheet_name in (TEACHER_LOAD_SHEET, SUGGESTIONS_SHEET):
                sheet_name = sanitize_sheet_name(f"{base_name[:28]} {suffix}")
                suffix += 1
            used_names.add(sheet_name)
            self.write_class_sheet(wb.create_sheet(sheet_name), class_name, entries)

        self.write_teacher_load_sheet(wb.create_sheet(TEACHER_LOAD_SHEET))
        self.write_suggestions_sheet(wb.create_sheet(SUGGESTIONS_SHEET))

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(output_path)
        return output_path


def generate_timetable_excel(result: OptimizationResult, output_path: Path | str) -> Path:
    """Write a result to an Excel workbook."""
    return TimetableExcelGenerator(result).generate(Path(output_path))
