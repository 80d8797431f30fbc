"""
ArrayFactory: same engine as Factory, but instances are plain dicts.
"""

from typing import Any, Dict, Mapping, Optional

import pandas as pd

from .factory import Factory


class ArrayFactory(Factory):
    """Factory whose instances are the resolved field mappings themselves."""

    def _materialize(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return fields

    def make_frame(self, overrides: Optional[Mapping[str, Any]] = None, /, **fields: Any) -> pd.DataFrame:
        """Make a batch of records and return it as a DataFrame, one column per field."""
        records = self.make(overrides, **fields)
        if self._count == 1:
            records = [records]
        return pd.DataFrame(records)
