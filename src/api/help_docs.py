"""Help documentation endpoint."""

from fastapi import APIRouter

from src.schemas.dashboard import HelpDocsData
from src.schemas.envelope import DataResponse

router = APIRouter(prefix="/api/help", tags=["help"])

HELP_DOCS = """# PortfolioPro Quick Start Guide

## Getting Started
1. Create your account and log in
2. Create a new portfolio site
3. Add your hero section with title and background image
4. Write your about section
5. Add at least 6 projects with images and descriptions
6. Customize your theme and colors
7. Set up SEO metadata
8. Publish your site!

## Key Features
- **Hero Section**: Make a great first impression with a compelling headline and hero image
- **About Section**: Tell your story and showcase your skills
- **Projects**: Display your best work with images, descriptions, and links
- **Theme Customization**: Choose from templates and customize colors/fonts
- **SEO Optimization**: Set meta titles and descriptions for better search visibility
- **Static Export**: Download your portfolio as a standalone website
- **Subdomain Hosting**: Get a free subdomain to share your work

## Tips for Success
- Use high-quality images (recommended: 1200x800px or larger)
- Write compelling project descriptions that tell a story
- Include links to live demos and source code when possible
- Keep your about section concise but personal
- Update your portfolio regularly with new projects

## Technical Requirements
- Modern web browser (Chrome, Firefox, Safari, Edge)
- Image files: JPG, PNG, WebP (max 10MB each)
- Recommended screen resolution: 1920x1080 or higher

## Support
If you need help, contact our support team or check our FAQ section."""


@router.get("/docs", response_model=DataResponse[HelpDocsData])
async def get_help_docs():
    """Quick start guide in markdown. No authentication required."""
    return DataResponse(data=HelpDocsData(content=HELP_DOCS))
