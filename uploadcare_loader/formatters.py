from typing import Dict, List
import logging
from prettytable import PrettyTable

logger = logging.getLogger(__name__)

class TableFormatter:
    """Handles table formatting for loader output"""

    def __init__(self):
        self.alignments = {
            'numeric': 'r',
            'text': 'l',
        }

    def format_table(self, data: List[Dict], columns: List[str],
                     column_types: Dict[str, str]) -> PrettyTable:
        """Create consistently formatted table"""
        table = PrettyTable()
        table.field_names = columns

        for col in columns:
            col_type = column_types.get(col, 'text')
            table.align[col] = self.alignments.get(col_type, 'l')

        for row in data:
            table.add_row([self._format_value(row.get(col, ''), column_types.get(col, 'text'))
                           for col in columns])

        return table

    def _format_value(self, value, value_type: str) -> str:
        if value_type == 'numeric':
            if isinstance(value, int) and value > 0:
                return str(value)
            return "auto"
        return str(value)

    def format_variants_table(self, data: List[Dict]) -> PrettyTable:
        """Format per-width loader URLs"""
        columns = ['Width', 'URL']
        column_types = {
            'Width': 'numeric',
            'URL': 'text'
        }
        return self.format_table(data, columns, column_types)
