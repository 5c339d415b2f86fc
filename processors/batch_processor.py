"""
Batch processing operations for subtitle files.

This module converts every subtitle file under a folder tree, mirroring the
tree into an export folder, with progress logging and per-file error isolation.
"""

from pathlib import Path
from typing import List, Dict, Any, Optional, Tuple
from concurrent.futures import ThreadPoolExecutor, as_completed
from utils.constants import DEFAULT_MAX_WORKERS
from utils.logging_config import get_logger
from utils.file_operations import FileHandler
from .converter import RTLConverter, RTLFixError

logger = get_logger(__name__)


class BatchProcessor:
    """Handles batch RTL fixing of subtitle folders."""

    def __init__(self, converter: Optional[RTLConverter] = None,
                 max_workers: int = DEFAULT_MAX_WORKERS):
        """
        Initialize the batch processor.

        Args:
            converter: Converter used for every file (default character set if None)
            max_workers: Maximum number of worker threads for parallel processing
        """
        self.converter = converter or RTLConverter()
        self.max_workers = max_workers

    def process_directory(self, directory: Path, export_dir: Path,
                          parallel: bool = False, **kwargs) -> Dict[str, Any]:
        """
        Fix all subtitle files in a folder tree and save them under export_dir.

        Sub-folders are recreated under export_dir; a file at
        ``directory/a/b.sbv`` is written to ``export_dir/a/b.sbv``.

        Args:
            directory: Folder to process recursively
            export_dir: Folder receiving the fixed files
            parallel: Whether to use parallel processing
            **kwargs: Additional arguments for RTLConverter.convert_file

        Returns:
            Dictionary with processing results

        Example:
            >>> processor = BatchProcessor()
            >>> results = processor.process_directory(Path("input"), Path("output"))
            >>> print(processor.get_processing_summary(results))
        """
        logger.info(f"Scanning directory: {directory}")

        subtitle_files = FileHandler.find_subtitle_files(directory, recursive=True)
        jobs = [(path, export_dir / path.relative_to(directory)) for path in subtitle_files]

        if not jobs:
            logger.warning(f"No subtitle files found in {directory}")

        export_dir.mkdir(parents=True, exist_ok=True)
        return self.process_files(jobs, parallel, **kwargs)

    def process_files(self, jobs: List[Tuple[Path, Path]], parallel: bool = False,
                      **kwargs) -> Dict[str, Any]:
        """
        Fix a list of (input, output) file pairs.

        A failing file is recorded and skipped; the remaining files are still
        processed.

        Args:
            jobs: List of (input_path, output_path) tuples
            parallel: Whether to use parallel processing
            **kwargs: Additional arguments for RTLConverter.convert_file

        Returns:
            Dictionary with processing results
        """
        logger.info(f"Starting batch RTL fix for {len(jobs)} subtitle files")

        results = {
            'total': len(jobs),
            'successful': 0,
            'failed': 0,
            'errors': [],
            'processed_files': []
        }

        if parallel and len(jobs) > 1:
            return self._process_parallel(jobs, results, **kwargs)
        return self._process_sequential(jobs, results, **kwargs)

    def _process_parallel(self, jobs: List[Tuple[Path, Path]],
                          results: Dict[str, Any], **kwargs) -> Dict[str, Any]:
        """Process files in a thread pool; completion order is not preserved."""
        def fix_file(input_path: Path, output_path: Path) -> Tuple[Path, Optional[str]]:
            try:
                self.converter.convert_file(input_path, output_path, **kwargs)
                return input_path, None
            except RTLFixError as e:
                return input_path, str(e)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(fix_file, input_path, output_path)
                       for input_path, output_path in jobs]

            for future in as_completed(futures):
                input_path, error = future.result()
                self._record(results, input_path, error)

        return results

    def _process_sequential(self, jobs: List[Tuple[Path, Path]],
                            results: Dict[str, Any], **kwargs) -> Dict[str, Any]:
        """Process files one at a time in the given order."""
        for i, (input_path, output_path) in enumerate(jobs, 1):
            logger.debug(f"Processing {i}/{len(jobs)}: {input_path.name}")

            try:
                self.converter.convert_file(input_path, output_path, **kwargs)
                error = None
            except RTLFixError as e:
                error = str(e)

            self._record(results, input_path, error)

        return results

    @staticmethod
    def _record(results: Dict[str, Any], input_path: Path, error: Optional[str]) -> None:
        if error:
            results['failed'] += 1
            error_msg = f"Error fixing {input_path.name}: {error}"
            results['errors'].append(error_msg)
            logger.error(f"✗ {error_msg}")
        else:
            results['successful'] += 1
            results['processed_files'].append(str(input_path))
            logger.info(f"✓ Fixed: {input_path.name}")

    def get_processing_summary(self, results: Dict[str, Any]) -> str:
        """
        Generate a human-readable summary of processing results.

        Args:
            results: Results dictionary from batch processing

        Returns:
            Formatted summary string
        """
        total = results.get('total', 0)
        successful = results.get('successful', 0)
        failed = results.get('failed', 0)

        summary_lines = [
            "Batch Processing Summary:",
            f"  Total files: {total}",
            f"  Successful: {successful}",
        ]

        if failed > 0:
            summary_lines.append(f"  Failed: {failed}")
            for error in results.get('errors', []):
                summary_lines.append(f"    - {error}")

        return '\n'.join(summary_lines)
