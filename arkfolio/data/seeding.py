"""
Seed the database from the JSON files shipped under ``data/seeds``.

Layout of the seed directory::

    themes.json          {"themes": [{name, slug, ..., cssFile}]}
    themes/<cssFile>     {"cssContent": "..."}
    carousel.json        [{title, subtitle, ..., order, isActive}]
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from sqlalchemy.ext.asyncio import AsyncSession

from arkfolio.data.repositories.carousel_repository import CarouselRepository
from arkfolio.data.repositories.theme_repository import ThemeRepository
from arkfolio.domain.entities.carousel_item import CarouselItem
from arkfolio.domain.entities.theme import Theme
from arkfolio.infra.config.logging_config import get_logger

log = get_logger("data.seeding")


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _load_css(css_dir: Path, css_file: str) -> str:
    css_path = css_dir / css_file
    if not css_path.exists():
        log.warning("seed.theme.css_missing", css_file=css_file)
        return ""
    data = _read_json(css_path)
    return data.get("cssContent") or ""


async def seed_themes(session: AsyncSession, seed_dir: Union[str, Path]) -> int:
    """Insert manifest themes whose slug is not stored yet. Returns the count."""
    seed_dir = Path(seed_dir)
    manifest_path = seed_dir / "themes.json"
    if not manifest_path.exists():
        log.info("seed.themes.skipped", reason="manifest_missing")
        return 0

    entries = _read_json(manifest_path).get("themes") or []
    repo = ThemeRepository(session)
    seeded = skipped = 0

    for entry in entries:
        if await repo.exists_by_slug(entry["slug"]):
            skipped += 1
            continue
        await repo.create(_theme_from_entry(entry, _load_css(seed_dir / "themes", entry.get("cssFile", ""))))
        seeded += 1

    log.info("seed.themes.done", seeded=seeded, skipped=skipped)
    return seeded


async def seed_carousel(session: AsyncSession, seed_dir: Union[str, Path]) -> int:
    """Insert carousel items only into an empty table. Returns the count."""
    data_path = Path(seed_dir) / "carousel.json"
    if not data_path.exists():
        log.info("seed.carousel.skipped", reason="file_missing")
        return 0

    repo = CarouselRepository(session)
    if await repo.count() > 0:
        log.info("seed.carousel.skipped", reason="already_populated")
        return 0

    items = _read_json(data_path)
    for entry in items:
        await repo.create(
            CarouselItem(
                id=None,
                title=entry["title"],
                image_url=entry.get("imageUrl", ""),
                subtitle=entry.get("subtitle"),
                description=entry.get("description"),
                link_url=entry.get("linkUrl"),
                link_text=entry.get("linkText"),
                order=entry.get("order", 0),
                is_active=entry.get("isActive", True),
                project_id=entry.get("projectId"),
            )
        )
    log.info("seed.carousel.done", seeded=len(items))
    return len(items)


async def seed_database(session: AsyncSession, seed_dir: Union[str, Path]) -> Dict[str, int]:
    counts = {
        "themes": await seed_themes(session, seed_dir),
        "carousel": await seed_carousel(session, seed_dir),
    }
    await session.commit()
    return counts


def _theme_from_entry(entry: Dict[str, Any], css_content: str) -> Theme:
    return Theme(
        id=None,
        name=entry["name"],
        slug=entry["slug"],
        css_content=css_content,
        description=entry.get("description"),
        preview_color=entry.get("previewColor"),
        icon=entry.get("icon"),
        is_default=bool(entry.get("isDefault", False)),
        order=entry.get("order", 0),
        is_active=True,
    )
