# providers/environment.py

from axe_sarif_converter.domain.conversion.models import EnvironmentData
from axe_sarif_converter.schemas import ScanResultDocument


def get_environment_data(document: ScanResultDocument) -> EnvironmentData:
    """
    Extract the scan context from an axe results document.

    Args:
        document (ScanResultDocument): The scan document.

    Returns:
        EnvironmentData: Timestamp, page url and title, and engine version;
            each None when the document does not carry it.
    """
    return EnvironmentData(
        timestamp=document.timestamp,
        target_page_url=document.url,
        target_page_title=document.target_page_title,
        axe_version=document.test_engine.version,
    )
