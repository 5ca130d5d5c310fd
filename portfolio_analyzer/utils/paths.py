"""
Path utilities for the portfolio analyzer.

Provides directory management and safe file naming for report artifacts.
"""

import os
import re


def ensure_dir(path: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.
    
    Args:
        path: Directory path to ensure exists
    """
    os.makedirs(path, exist_ok=True)


def ensure_parent_dir(file_path: str) -> None:
    """
    Ensure the parent directory of a file exists.
    
    Args:
        file_path: File path whose parent directory should exist
    """
    parent = os.path.dirname(file_path)
    if parent:
        ensure_dir(parent)


def sanitize_filename(name: str) -> str:
    """
    Convert a capture name or URL to a safe filename.
    
    Args:
        name: Name to sanitize
        
    Returns:
        Filename-safe string of at most 100 characters
    """
    name = re.sub(r'^https?://', '', name)
    name = re.sub(r'^www\.', '', name)
    name = re.sub(r'[<>:"/\\|?*\s]', '_', name)
    return name[:100]
