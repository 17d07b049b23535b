"""
JSON export for ptrcname
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from .. import __version__
from ..models import Endpoint


class JsonExporter:
    """
    Export processed endpoints to JSON.

    The "endpoints" list uses the same shape the file and HTTP
    sources read, so an export can be fed back in as a source.
    """

    def __init__(self, source: Optional[str] = None):
        self.source = source

    def export(self, endpoints: list[Endpoint], rewritten: set[int],
               output_path: Optional[Path] = None) -> dict:
        """
        Export endpoints to JSON.

        Args:
            endpoints: Processed endpoints
            rewritten: Indexes of endpoints turned into CNAMEs
            output_path: Optional file path to write

        Returns:
            JSON-serializable dict
        """
        data = {
            "meta": {
                "version": __version__,
                "generator": "ptrcname",
                "source": self.source,
                "generated_at": datetime.now().isoformat()
            },
            "endpoints": [ep.to_dict() for ep in endpoints],
            "summary": {
                "total": len(endpoints),
                "rewritten": len(rewritten),
                "rewritten_names": [endpoints[i].dns_name for i in sorted(rewritten)]
            }
        }

        if output_path:
            self._write_file(data, output_path)

        return data

    def _write_file(self, data: dict, path: Path):
        """Write JSON to file"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
