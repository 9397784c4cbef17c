"""
JSON export functionality.
Writes the per-URL results of one run as a single structured document.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from revelio import __version__
from revelio.core.logger import logger
from revelio.models import ExtractionRequest, UrlResult


class JSONExporter:

    def build_report(self, results: List[UrlResult], request: Optional[ExtractionRequest] = None) -> Dict:
        return {
            'meta': {
                'tool': 'revelio-js',
                'version': __version__,
                'mode': request.mode.value if request else None,
                'generated_at': datetime.now().isoformat()
            },
            'summary': self._generate_summary(results),
            'results': [r.to_dict() for r in results]
        }

    def _generate_summary(self, results: List[UrlResult]) -> Dict:
        return {
            'total_urls': len(results),
            'failed_urls': sum(1 for r in results if not r.ok),
            'total_findings': sum(len(r.findings) for r in results)
        }

    def export(self, filepath: str, results: List[UrlResult], request: Optional[ExtractionRequest] = None) -> str:
        report = self.build_report(results, request)

        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2)

        logger.info(f"JSON report exported to {path}")
        return str(path)

    @staticmethod
    def load_results(filepath: str) -> List[UrlResult]:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return [UrlResult.from_dict(r) for r in data.get('results', [])]
