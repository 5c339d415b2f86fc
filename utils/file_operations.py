"""
File operations and backup utilities for subtitle processing.

This module provides safe file operations including:
- Backup creation with timestamps
- Reading with encoding detection
- Atomic writing
- Directory listing and subtitle file discovery
"""

import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from .constants import BACKUP_DIR_NAME, IGNORED_FILE_NAMES, SUBTITLE_EXTENSIONS
from .logging_config import get_logger

logger = get_logger(__name__)


class FileHandler:
    """Handles file operations with proper error handling and logging."""

    @staticmethod
    def read_text(file_path: Path) -> str:
        """
        Read the full content of a subtitle file as text.

        Args:
            file_path: Path to the file to read

        Returns:
            Decoded file content (BOM removed)

        Raises:
            IOError: If the file is missing or cannot be decoded
        """
        # Deferred import: core modules import utils at load time
        from core.encoding_detection import EncodingDetector

        if not file_path.is_file():
            raise IOError(f"File not found: {file_path}")

        content, encoding = EncodingDetector.read_file_with_encoding(file_path)
        logger.debug(f"Read {file_path.name} with encoding: {encoding}")
        return content

    @staticmethod
    def create_backup(file_path: Path, backup_dir: Optional[Path] = None) -> Path:
        """
        Create a backup of the file with timestamp.

        Args:
            file_path: Path to the file to backup
            backup_dir: Optional custom backup directory

        Returns:
            Path to the created backup file

        Raises:
            IOError: If backup creation fails

        Example:
            >>> backup_path = FileHandler.create_backup(Path("episode.sbv"))
            >>> print(f"Backup created at: {backup_path}")
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if backup_dir is None:
            backup_dir = file_path.parent / BACKUP_DIR_NAME

        backup_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        backup_name = f"{file_path.stem}_{timestamp}{file_path.suffix}"
        backup_path = backup_dir / backup_name

        try:
            shutil.copy2(file_path, backup_path)
            logger.debug(f"Created backup: {backup_path}")
            return backup_path
        except OSError as e:
            logger.error(f"Failed to create backup for {file_path}: {e}")
            raise IOError(f"Backup creation failed: {e}") from e

    @staticmethod
    def safe_write(file_path: Path, content: str, encoding: str = 'utf-8',
                   create_backup: bool = False) -> None:
        """
        Atomically write content to a file with optional backup.

        The content goes to a temporary file in the target directory first and
        replaces the target in a single rename, so readers never observe a
        half-written file.

        Args:
            file_path: Path to write to
            content: Content to write
            encoding: File encoding to use
            create_backup: Whether to create backup if file exists

        Raises:
            IOError: If write operation fails

        Example:
            >>> FileHandler.safe_write(Path("output.sbv"), subtitle_content)
        """
        temp_path = None
        try:
            if create_backup and file_path.exists():
                FileHandler.create_backup(file_path)

            file_path.parent.mkdir(parents=True, exist_ok=True)

            with tempfile.NamedTemporaryFile('w', encoding=encoding, newline='',
                                             dir=file_path.parent,
                                             prefix=f".{file_path.name}.",
                                             suffix='.tmp', delete=False) as f:
                temp_path = Path(f.name)
                f.write(content)

            os.replace(temp_path, file_path)
            temp_path = None
            logger.debug(f"Successfully wrote file: {file_path}")

        except (OSError, UnicodeEncodeError) as e:
            logger.error(f"Failed to write file {file_path}: {e}")
            raise IOError(f"Write operation failed: {e}") from e
        finally:
            if temp_path is not None and temp_path.exists():
                temp_path.unlink()

    @staticmethod
    def list_directory(directory: Path) -> List[Path]:
        """
        List the entries of a directory, skipping system clutter files.

        Args:
            directory: Directory to list

        Returns:
            Sorted list of entry paths

        Raises:
            IOError: If the directory cannot be listed
        """
        try:
            entries = [entry for entry in directory.iterdir()
                       if entry.name not in IGNORED_FILE_NAMES]
        except OSError as e:
            logger.error(f"Failed to list directory {directory}: {e}")
            raise IOError(f"Cannot list directory {directory}: {e}") from e

        entries.sort()
        return entries

    @staticmethod
    def find_subtitle_files(directory: Path, recursive: bool = True) -> List[Path]:
        """
        Find all subtitle files in a directory.

        Args:
            directory: Directory to search
            recursive: Whether to search recursively

        Returns:
            List of subtitle file paths

        Example:
            >>> files = FileHandler.find_subtitle_files(Path("/media/episodes"))
            >>> print(f"Found {len(files)} subtitle files")
        """
        if not directory.exists() or not directory.is_dir():
            logger.warning(f"Directory not found or not a directory: {directory}")
            return []

        subtitle_files = []

        for entry in FileHandler.list_directory(directory):
            if entry.is_dir():
                if recursive:
                    subtitle_files.extend(FileHandler.find_subtitle_files(entry, recursive))
            elif entry.suffix.lower() in SUBTITLE_EXTENSIONS:
                subtitle_files.append(entry)

        subtitle_files.sort()

        logger.debug(f"Found {len(subtitle_files)} subtitle files in {directory}")
        return subtitle_files
