"""
Export placed orders to XLSX format.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill

from storefront.core.catalog import format_price
from storefront.core.orders.models import PlacedOrder

logger = logging.getLogger(__name__)


class OrderExporter:
    """Export orders to XLSX format."""

    HEADER_FONT = Font(bold=True, size=14)
    SUBHEADER_FONT = Font(bold=True, size=11)

    HEADER_FILL = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
    HEADER_FONT_WHITE = Font(bold=True, size=11, color="FFFFFF")
    ALT_ROW_FILL = PatternFill(start_color="D9E2F3", end_color="D9E2F3", fill_type="solid")

    THIN_BORDER = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )

    CENTER_ALIGN = Alignment(horizontal='center', vertical='center')
    LEFT_ALIGN = Alignment(horizontal='left', vertical='center')
    RIGHT_ALIGN = Alignment(horizontal='right', vertical='center')
    WRAP_ALIGN = Alignment(horizontal='left', vertical='top', wrap_text=True)

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir) if output_dir else Path("data/orders")

    def export(self, order: PlacedOrder, output_dir: Optional[Path] = None) -> Path:
        """
        Export order to XLSX file.

        Args:
            order: Order to export
            output_dir: Directory for output file (default: self.output_dir)

        Returns:
            Path to created XLSX file
        """
        output_dir = Path(output_dir) if output_dir else self.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = output_dir / f"order_{order.id}_{timestamp}.xlsx"

        wb = Workbook()
        ws = wb.active
        ws.title = f"Order {order.id}"

        ws.column_dimensions['A'].width = 5
        ws.column_dimensions['B'].width = 35
        ws.column_dimensions['C'].width = 10
        ws.column_dimensions['D'].width = 12
        ws.column_dimensions['E'].width = 14

        row = 1

        # === HEADER ===
        ws.merge_cells(f'A{row}:E{row}')
        cell = ws.cell(row=row, column=1, value=f"ORDER {order.order_number}")
        cell.font = self.HEADER_FONT
        cell.alignment = self.CENTER_ALIGN
        row += 1

        ws.merge_cells(f'A{row}:E{row}')
        cell = ws.cell(row=row, column=1, value=order.created_at.strftime('%d.%m.%Y %H:%M'))
        cell.alignment = self.CENTER_ALIGN
        row += 2

        # === ITEMS TABLE ===
        headers = ["#", "Product", "Qty", "Price", "Amount"]
        for col, header in enumerate(headers, 1):
            cell = ws.cell(row=row, column=col, value=header)
            cell.font = self.HEADER_FONT_WHITE
            cell.fill = self.HEADER_FILL
            cell.border = self.THIN_BORDER
            cell.alignment = self.CENTER_ALIGN
        row += 1

        for i, line in enumerate(order.items, 1):
            values = [
                i,
                line.product.name,
                line.quantity,
                format_price(line.product.price),
                format_price(line.total_price),
            ]
            for col, value in enumerate(values, 1):
                cell = ws.cell(row=row, column=col, value=value)
                cell.border = self.THIN_BORDER
                if col == 1:
                    cell.alignment = self.CENTER_ALIGN
                elif col == 2:
                    cell.alignment = self.LEFT_ALIGN
                else:
                    cell.alignment = self.RIGHT_ALIGN
                if i % 2 == 0:
                    cell.fill = self.ALT_ROW_FILL
            row += 1

        # Total row
        ws.merge_cells(f'A{row}:B{row}')
        cell = ws.cell(row=row, column=1, value="TOTAL:")
        cell.font = self.SUBHEADER_FONT
        cell.alignment = self.RIGHT_ALIGN

        cell = ws.cell(row=row, column=3, value=order.total_quantity)
        cell.font = self.SUBHEADER_FONT
        cell.alignment = self.RIGHT_ALIGN

        cell = ws.cell(row=row, column=5, value=format_price(order.total_price))
        cell.font = self.SUBHEADER_FONT
        cell.alignment = self.RIGHT_ALIGN
        row += 2

        # === CUSTOMER ===
        ws.cell(row=row, column=1, value="CUSTOMER:").font = self.SUBHEADER_FONT
        row += 1

        ws.merge_cells(f'B{row}:E{row}')
        ws.cell(row=row, column=1, value="Phone:")
        ws.cell(row=row, column=2, value=order.phone)
        row += 1

        ws.merge_cells(f'B{row}:E{row}')
        ws.cell(row=row, column=1, value="Address:")
        cell = ws.cell(row=row, column=2, value=order.address)
        cell.alignment = self.WRAP_ALIGN
        row += 1

        ws.merge_cells(f'B{row}:E{row}')
        ws.cell(row=row, column=1, value="User:")
        ws.cell(row=row, column=2, value=str(order.owner_id))

        wb.save(filepath)
        logger.info(f"Order exported to {filepath}")

        return filepath
