# textcompare/utils/encoding_detector.py

import chardet
from textcompare.utils.logger import logger

def detect_file_encoding(file_path: str) -> str:
    """
    Detect the encoding of a text file about to be compared.

    Args:
        file_path (str): Path to the file

    Returns:
        str: Detected encoding or 'utf-8' as fallback
    """
    try:
        with open(file_path, 'rb') as f:
            raw = f.read(10000)  # Read first 10KB
        # Fast path: UTF-8 is common; if it decodes, use it without chardet
        try:
            raw.decode('utf-8')
            return 'utf-8'
        except UnicodeDecodeError:
            pass
        result = chardet.detect(raw)
        enc = result.get('encoding') or 'utf-8'
        logger.debug(f"Detected {enc} for {file_path}")
        return enc
    except OSError as e:
        logger.error(f"Failed to detect encoding for {file_path}: {str(e)}")
        return 'utf-8'

def read_text_file(file_path: str) -> str:
    """Read a whole file using its detected encoding, replacing undecodable bytes."""
    encoding = detect_file_encoding(file_path)
    with open(file_path, "r", encoding=encoding, errors="replace", newline="") as f:
        return f.read()
