# tests/test_migrations.py
"""The Alembic history must build the same schema as the ORM metadata."""

from argparse import Namespace

from alembic import command
from sqlalchemy import create_engine, inspect

from devoverflow.db.session import Base
from devoverflow.scripts.migrate import build_config, run_upgrade_head


def test_upgrade_head_matches_models(tmp_path) -> None:
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    run_upgrade_head(url)

    engine = create_engine(url)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names()) - {"alembic_version"}
        assert tables == set(Base.metadata.tables)

        for name, table in Base.metadata.tables.items():
            migrated = {column["name"] for column in inspector.get_columns(name)}
            assert migrated == {column.name for column in table.columns}, name
    finally:
        engine.dispose()


def test_url_argument_overrides_configured_url(tmp_path) -> None:
    configured = tmp_path / "configured.db"
    requested = tmp_path / "requested.db"
    cfg = build_config(f"sqlite:///{configured}")
    cfg.cmd_opts = Namespace(x=[f"url=sqlite:///{requested}"])

    command.upgrade(cfg, "head")

    assert requested.exists()
    assert not configured.exists()
