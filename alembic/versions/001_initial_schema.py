"""Initial schema - users, documents, site_content, lead, match_documents.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from pgvector.sqlalchemy import Vector
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

EMBEDDING_DIMENSIONS = 1536


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS vector")

    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("role IN ('admin', 'user')", name="ck_users_role"),
    )

    op.create_table(
        "documents",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("source", sa.Text(), nullable=True),
        sa.Column("chunk_index", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("metadata", JSONB(), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("embedding", Vector(EMBEDDING_DIMENSIONS), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_documents_source", "documents", ["source"])
    op.execute(
        "CREATE INDEX ix_documents_embedding ON documents "
        "USING hnsw (embedding vector_cosine_ops)"
    )

    op.create_table(
        "site_content",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("key", sa.String(255), nullable=False),
        sa.Column("locale", sa.String(10), nullable=False, server_default="tr"),
        sa.Column("section", sa.String(255), nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("metadata", JSONB(), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_site_content_key_locale", "site_content", ["key", "locale"], unique=True)

    op.create_table(
        "lead",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("source", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.execute(f"""
        CREATE OR REPLACE FUNCTION match_documents(
            query_embedding vector({EMBEDDING_DIMENSIONS}),
            match_count int,
            min_similarity float,
            filter_source text DEFAULT NULL
        )
        RETURNS TABLE (
            id uuid,
            content text,
            metadata jsonb,
            source text,
            chunk_index int,
            similarity float
        )
        LANGUAGE sql STABLE
        AS $$
            SELECT d.id, d.content, d.metadata, d.source, d.chunk_index,
                   1 - (d.embedding <=> query_embedding) AS similarity
            FROM documents d
            WHERE (filter_source IS NULL OR d.source = filter_source)
              AND 1 - (d.embedding <=> query_embedding) >= min_similarity
            ORDER BY d.embedding <=> query_embedding
            LIMIT match_count
        $$
    """)


def downgrade() -> None:
    op.execute("DROP FUNCTION IF EXISTS match_documents(vector, int, float, text)")
    op.drop_table("lead")
    op.drop_table("site_content")
    op.drop_table("documents")
    op.drop_table("users")
    op.execute("DROP EXTENSION IF EXISTS vector")
