"""Project service for multi-statement project mutations."""

from sqlalchemy import delete, func
from sqlalchemy.orm import Session

from src.models.asset import ImageAsset
from src.models.project import Project
from src.schemas.project import ProjectCreate
from src.services.storage import delete_stored_file


class ProjectService:
    """Service for project operations."""

    def __init__(self, db: Session):
        self.db = db

    def next_order_index(self, site_id: str) -> int:
        """Order index placing a new project after the existing ones."""
        current_max = (
            self.db.query(func.max(Project.order_index)).filter(Project.site_id == site_id).scalar()
        )
        return 0 if current_max is None else current_max + 1

    def create_project(self, site_id: str, data: ProjectCreate) -> Project:
        order_index = data.order_index
        if order_index is None:
            order_index = self.next_order_index(site_id)

        project = Project(
            site_id=site_id,
            title=data.title,
            description=data.description,
            date=data.date,
            tags=list(data.tags),
            demo_url=data.demo_url,
            code_url=data.code_url,
            images=list(data.images),
            order_index=order_index,
        )
        self.db.add(project)
        self.db.commit()
        self.db.refresh(project)
        return project

    def delete_project(self, project: Project) -> None:
        """Delete a project and its image assets in one transaction.

        Stored image files are removed once the transaction has committed.
        """
        stored_files = [
            filename
            for (filename,) in self.db.query(ImageAsset.storage_filename).filter(
                ImageAsset.project_id == project.project_id,
                ImageAsset.storage_filename.isnot(None),
            )
        ]
        try:
            self.db.execute(delete(ImageAsset).where(ImageAsset.project_id == project.project_id))
            self.db.execute(delete(Project).where(Project.project_id == project.project_id))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        for filename in stored_files:
            delete_stored_file(filename)

    def add_project_image(
        self,
        project: Project,
        url: str,
        alt_text: str | None = None,
        storage_filename: str | None = None,
    ) -> ImageAsset:
        """Record an image asset for a project and append its URL, in one transaction."""
        try:
            asset = ImageAsset(
                site_id=project.site_id,
                project_id=project.project_id,
                url=url,
                storage_filename=storage_filename,
                alt_text=alt_text,
            )
            self.db.add(asset)
            # Reassign so the JSON column is flagged as changed
            project.images = [*(project.images or []), url]
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(asset)
        return asset
