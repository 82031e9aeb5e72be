from __future__ import annotations
import hashlib
import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_DATA_URL = "https://waytoomuchcoding.github.io/Unihan_Reference//assets/unihan.csv"

class DatasetFetchError(RuntimeError):
    pass

def fetch_dataset(url: str = DEFAULT_DATA_URL, timeout: float = 30.0) -> str:
    """Download the default dataset as text; raise DatasetFetchError on any transport problem."""
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Fetch of %s failed: %s", url, e)
        raise DatasetFetchError(
            "Could not auto-load data (network error or blocked request). "
            "Please download the CSV manually and upload it below.") from e
    # servers often omit the charset for text/csv; the dataset is always UTF-8, maybe with a BOM
    resp.encoding = "utf-8-sig"
    logger.info("Fetched %d bytes from %s", len(resp.content), url)
    return resp.text

def decode_upload(data: bytes) -> str:
    return data.decode("utf-8-sig", errors="replace")

def upload_fingerprint(data: bytes) -> str:
    return hashlib.sha1(data).hexdigest()
