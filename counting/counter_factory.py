"""
Factory for creating node counters.

This provides a centralized way to instantiate the counter matching the
command-line options.
"""

from typing import List
from .counter_base import NodeCounter
from .tree_size_counter import TreeSizeNodeCounter
from .csv_counter import CsvNodeCounter
from .zooma_counter import ZoomaNodeCounter


class NodeCounterFactory:
    """
    Factory class for creating node counters.
    """

    @staticmethod
    def create_counter(kind: str = 'tree', **kwargs) -> NodeCounter:
        """
        Create a node counter of the given kind.

        Args:
            kind: Counter kind ('tree', 'csv' or 'zooma')
            **kwargs: Counter-specific configuration
                For csv:
                    - csv_path: Path to the counts table (required)
                For zooma:
                    - datasource: Datasource URI (default: GWAS catalog)
                    - query_url: ZOOMA query endpoint
                    - timeout: Request timeout in seconds
                    - default_datasource: Datasource used when none is given

        Returns:
            Configured node counter

        Raises:
            ValueError: If the kind is not supported or a required option is missing
        """
        kind = kind.lower().strip()

        if kind == 'tree':
            return TreeSizeNodeCounter()
        elif kind == 'csv':
            csv_path = kwargs.get('csv_path')
            if not csv_path:
                raise ValueError("The 'csv' counter requires a csv_path")
            return CsvNodeCounter(csv_path)
        elif kind == 'zooma':
            zooma_options = {
                key: kwargs[key]
                for key in ('query_url', 'timeout', 'client', 'default_datasource')
                if kwargs.get(key) is not None
            }
            return ZoomaNodeCounter(datasource=kwargs.get('datasource'), **zooma_options)
        else:
            raise ValueError(
                f"Unsupported node counter: '{kind}'. "
                f"Supported counters: {', '.join(NodeCounterFactory.get_supported_counters())}"
            )

    @staticmethod
    def get_supported_counters() -> List[str]:
        """
        Get list of supported counter kinds.

        Returns:
            List of counter names
        """
        return ['tree', 'csv', 'zooma']
