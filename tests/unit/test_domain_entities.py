"""Domain entity and value object tests."""

import pytest

from arkfolio.api.schemas import CarouselSlideDto, ThemeDetail, ThemeListItem
from arkfolio.domain.entities import CarouselItem, Slide, Theme
from arkfolio.domain.value_objects import (
    LAYOUT_THEME_CONFIGS,
    CyberThemeMode,
    Direction,
    LayoutVariant,
)


class TestSlide:
    """Test cases for Slide entity."""

    def test_slide_requires_title(self):
        with pytest.raises(ValueError, match="title"):
            Slide(id=1, title="")

    def test_slide_is_immutable(self):
        slide = Slide(id=1, title="A")
        with pytest.raises(AttributeError):
            slide.title = "B"


class TestCarouselItem:
    """Test cases for CarouselItem public mapping rules."""

    def test_explicit_link_and_label(self):
        item = CarouselItem(
            id=1,
            title="Ark",
            image_url="/a.png",
            link_url="/projects/ark",
            link_text="Explore",
            project_id="ignored",
        )

        assert item.cta_label() == "Explore"
        assert item.cta_link() == "/projects/ark"

    def test_project_link_fallback(self):
        item = CarouselItem(id=2, title="CMS", image_url="/c.png", project_id="cms")

        assert item.cta_label() == "Learn More"
        assert item.cta_link() == "/projects/cms"

    def test_project_index_fallback(self):
        item = CarouselItem(id=3, title="Data", image_url="/d.png")

        assert item.cta_link() == "/projects"

    def test_public_dto_maps_to_slide(self):
        item = CarouselItem(id=4, title="X", image_url="/x.png", subtitle="sub")
        slide = CarouselSlideDto.from_entity(item).to_slide()

        assert slide == Slide(
            id=4,
            title="X",
            subtitle="sub",
            image_url="/x.png",
            cta_label="Learn More",
            cta_link="/projects",
        )


class TestThemeSchemas:
    """Test cases for Theme and its wire representations."""

    def test_detail_serializes_camel_case(self):
        theme = Theme(
            id=7,
            name="Neon",
            slug="neon",
            css_content="a {}",
            preview_color="#f0f",
            is_default=True,
            order=2,
        )

        data = ThemeDetail.from_entity(theme).model_dump(by_alias=True)

        assert data["cssContent"] == "a {}"
        assert data["previewColor"] == "#f0f"
        assert data["isDefault"] is True
        assert theme.has_css() is True

    def test_list_item_has_no_css(self):
        theme = Theme(id=1, name="Glass", slug="glass", css_content="   ")

        data = ThemeListItem.from_entity(theme).model_dump(by_alias=True)

        assert "cssContent" not in data
        assert theme.has_css() is False

    def test_slide_dto_parses_camel_case(self):
        dto = CarouselSlideDto.model_validate(
            {
                "id": 3,
                "title": "T",
                "imageUrl": "/t.png",
                "ctaLabel": "Learn More",
                "ctaLink": "/projects",
            }
        )

        assert dto.to_slide().image_url == "/t.png"


class TestValueObjects:
    """Test cases for enums and static configuration."""

    @pytest.mark.parametrize("value", ["neon", CyberThemeMode.NEON])
    def test_parse_valid_mode(self, value):
        assert CyberThemeMode.parse(value) is CyberThemeMode.NEON

    @pytest.mark.parametrize("value", [None, "", "NEON", "retro", 3])
    def test_parse_invalid_mode(self, value):
        assert CyberThemeMode.parse(value) is None

    def test_mode_cycle_wraps(self):
        assert CyberThemeMode.GLASS.next() is CyberThemeMode.PROFESSIONAL

    def test_direction_between(self):
        assert Direction.between(0, 2) is Direction.RIGHT
        assert Direction.between(2, 0) is Direction.LEFT
        assert Direction.between(1, 1) is Direction.LEFT

    def test_layout_configs_cover_every_variant(self):
        assert list(LAYOUT_THEME_CONFIGS) == list(LayoutVariant)
        assert LayoutVariant.ALOEVERA.css_class == "theme-aloevera"
