"""Static site export.

Placeholder implementation: the archive holds a single fixed index.html and
does not render the site's own content.
"""

import logging
import time
import zipfile
from datetime import UTC, datetime

from src.services.storage import get_storage_dir, storage_url

logger = logging.getLogger(__name__)

PLACEHOLDER_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Portfolio Export</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 0; padding: 20px; }}
        .hero {{ background: #f4f4f4; padding: 60px 20px; text-align: center; }}
        .projects {{ padding: 40px 20px; }}
        .project {{ margin-bottom: 30px; padding: 20px; border: 1px solid #ddd; }}
    </style>
</head>
<body>
    <div class="hero">
        <h1>Portfolio Site Export</h1>
        <p>Generated on {generated_at}</p>
    </div>
    <div class="projects">
        <h2>Projects</h2>
        <div class="project">
            <h3>Sample Project</h3>
            <p>This is a placeholder export. Site content is not rendered yet.</p>
        </div>
    </div>
</body>
</html>
"""


def render_placeholder_page(generated_at: datetime) -> str:
    return PLACEHOLDER_PAGE.format(generated_at=generated_at.isoformat())


def write_site_export(site_id: str) -> str:
    """Write the export archive for a site and return its storage URL.

    Raises:
        OSError: if the archive cannot be written.
    """
    filename = f"portfolio-{site_id}-{int(time.time() * 1000)}.zip"
    path = get_storage_dir() / filename

    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as archive:
        archive.writestr("index.html", render_placeholder_page(datetime.now(UTC)))

    logger.info(f"Exported site {site_id} to {filename}")
    return storage_url(filename)
