"""Dashboard, export and help schemas."""

from pydantic import BaseModel


class PreviewData(BaseModel):
    """Live preview status."""

    status: str
    url: str


class ExportData(BaseModel):
    """Location of a site's static export archive."""

    export_zip_url: str | None
    export_path: str | None


class HelpDocsData(BaseModel):
    """Help documentation in markdown."""

    content: str
