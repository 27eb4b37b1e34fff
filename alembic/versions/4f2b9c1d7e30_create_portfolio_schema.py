"""create portfolio schema

Revision ID: 4f2b9c1d7e30
Revises:
Create Date: 2026-10-18 09:12:44.108233

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2b9c1d7e30"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=100), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        *timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "roles",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "user_roles",
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("role_id", sa.String(length=36), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "role_id"),
    )

    op.create_table(
        "portfolio_sites",
        sa.Column("site_id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("site_title", sa.Text(), nullable=False),
        sa.Column("tagline", sa.Text(), nullable=True),
        sa.Column("hero_image_url", sa.Text(), nullable=True),
        sa.Column("about_text", sa.Text(), nullable=True),
        sa.Column("template_id", sa.String(length=100), nullable=True),
        sa.Column("primary_color", sa.String(length=50), nullable=True),
        sa.Column("font_family", sa.String(length=100), nullable=True),
        sa.Column("is_dark_mode", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("seo_title", sa.Text(), nullable=True),
        sa.Column("seo_description", sa.Text(), nullable=True),
        sa.Column("subdomain", sa.String(length=100), nullable=True),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("export_zip_url", sa.Text(), nullable=True),
        *timestamp_columns(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("site_id"),
        sa.UniqueConstraint("subdomain"),
    )
    op.create_index(
        op.f("ix_portfolio_sites_user_id"), "portfolio_sites", ["user_id"], unique=False
    )

    op.create_table(
        "portfolio_projects",
        sa.Column("project_id", sa.String(length=36), nullable=False),
        sa.Column("site_id", sa.String(length=36), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("demo_url", sa.Text(), nullable=True),
        sa.Column("code_url", sa.Text(), nullable=True),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("order_index", sa.Integer(), server_default="0", nullable=False),
        *timestamp_columns(),
        sa.ForeignKeyConstraint(["site_id"], ["portfolio_sites.site_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("project_id"),
    )
    op.create_index(
        op.f("ix_portfolio_projects_site_id"), "portfolio_projects", ["site_id"], unique=False
    )

    op.create_table(
        "image_assets",
        sa.Column("image_id", sa.String(length=36), nullable=False),
        sa.Column("site_id", sa.String(length=36), nullable=True),
        sa.Column("project_id", sa.String(length=36), nullable=True),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("storage_filename", sa.String(length=255), nullable=True),
        sa.Column("alt_text", sa.Text(), nullable=True),
        sa.Column(
            "uploaded_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["site_id"], ["portfolio_sites.site_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["project_id"], ["portfolio_projects.project_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("image_id"),
    )
    op.create_index(op.f("ix_image_assets_site_id"), "image_assets", ["site_id"], unique=False)
    op.create_index(
        op.f("ix_image_assets_project_id"), "image_assets", ["project_id"], unique=False
    )

    op.create_table(
        "contact_submissions",
        sa.Column("submission_id", sa.String(length=36), nullable=False),
        sa.Column("site_id", sa.String(length=36), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["site_id"], ["portfolio_sites.site_id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("submission_id"),
    )
    op.create_index(
        op.f("ix_contact_submissions_site_id"), "contact_submissions", ["site_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_contact_submissions_site_id"), table_name="contact_submissions")
    op.drop_table("contact_submissions")
    op.drop_index(op.f("ix_image_assets_project_id"), table_name="image_assets")
    op.drop_index(op.f("ix_image_assets_site_id"), table_name="image_assets")
    op.drop_table("image_assets")
    op.drop_index(op.f("ix_portfolio_projects_site_id"), table_name="portfolio_projects")
    op.drop_table("portfolio_projects")
    op.drop_index(op.f("ix_portfolio_sites_user_id"), table_name="portfolio_sites")
    op.drop_table("portfolio_sites")
    op.drop_table("user_roles")
    op.drop_table("roles")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
