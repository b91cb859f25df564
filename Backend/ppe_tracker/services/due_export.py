from io import BytesIO
from typing import List, Tuple

import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils import get_column_letter

from ppe_tracker.models.equipment_model import Equipment
from ppe_tracker.services.due_inspections import DueInfo

HEADERS = [
    "ID", "Personal ID", "Type", "Brand", "Model", "Serial Number",
    "Last Inspection", "Reference Date", "Interval (days)",
    "Next Inspection", "Days Remaining", "Status",
]
COLUMN_WIDTHS = [8, 16, 20, 16, 18, 20, 16, 16, 14, 16, 14, 12]

BUCKET_FILLS = {
    "overdue": "F8CBAD",
    "upcoming": "FFE699",
    "current": "C6EFCE",
}


def build_due_workbook(items: List[Tuple[Equipment, DueInfo]], days_threshold: int) -> bytes:
    """Render the due-inspection list as an .xlsx file and return its bytes."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = f"Due within {days_threshold} days"

    ws.append(HEADERS)

    header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF")
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)

    for equipment, info in items:
        ws.append([
            equipment.id,
            equipment.personal_id,
            equipment.equipment_type.label if equipment.equipment_type else "",
            equipment.brand,
            equipment.model,
            equipment.serial_number,
            info.last_inspection_date,
            info.reference_date,
            info.interval_days,
            info.next_inspection_date,
            info.days_remaining,
            info.bucket,
        ])
        fill = BUCKET_FILLS[info.bucket]
        ws.cell(row=ws.max_row, column=len(HEADERS)).fill = PatternFill(
            start_color=fill, end_color=fill, fill_type="solid"
        )

    for i, width in enumerate(COLUMN_WIDTHS, 1):
        ws.column_dimensions[get_column_letter(i)].width = width

    for row in ws.iter_rows(min_row=2, max_row=ws.max_row, min_col=7, max_col=10):
        for cell in row:
            if cell.value is not None and cell.column != 9:
                cell.number_format = "yyyy-mm-dd"

    output = BytesIO()
    wb.save(output)
    return output.getvalue()
