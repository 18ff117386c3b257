"""Tests for ValueResolver."""
from __future__ import annotations

from helpers.entities import color_field, color_term, entity, image_media, reference_field, simple_field
from modifiers.core.entity import InMemoryFile
from modifiers.core.entity.protocols import FieldStorage
from modifiers.core.extraction.mappings import DEFAULT_MAPPINGS, build_mappings
from modifiers.core.extraction.resolver import ValueResolver


def _resolver() -> ValueResolver:
    return ValueResolver()


class TestResolveSimple:
    def test_empty_field_is_none(self) -> None:
        field = simple_field("field_mod_padding", [])

        assert _resolver().resolve_simple(field, field.storage) is None

    def test_single_value_field_returns_first(self) -> None:
        field = simple_field("field_mod_padding", ["1rem", "2rem"])

        assert _resolver().resolve_simple(field, field.storage) == "1rem"

    def test_multiple_value_field_returns_list(self) -> None:
        field = simple_field("field_mod_classes", ["a", "b"], multiple=True)

        assert _resolver().resolve_simple(field, field.storage) == ["a", "b"]

    def test_main_property_is_used(self) -> None:
        field = simple_field("field_link", ["https://example.com"], main_property="uri")

        assert _resolver().resolve_simple(field, field.storage) == "https://example.com"

    def test_color_items_become_rgba(self) -> None:
        field = color_field(
            "field_mod_color",
            [{"color": "#fff", "opacity": "0.5"}, {"color": "nope", "opacity": "1"}],
            multiple=True,
        )

        assert _resolver().resolve_simple(field, field.storage) == ["rgba(255,255,255,0.5)", ""]

    def test_custom_color_types(self) -> None:
        field = color_field("field_mod_color", [{"color": "#000", "opacity": "1"}])
        resolver = ValueResolver(color_types={"legacy_color"})

        # "color" is no longer a color type, so the main property is taken verbatim.
        assert resolver.resolve_simple(field, field.storage) == "#000"


class TestResolveReference:
    def test_empty_reference_is_none(self) -> None:
        field = reference_field("field_mod_media", [])

        assert _resolver().resolve_reference(field, field.storage, DEFAULT_MAPPINGS) is None

    def test_image_media_resolves_to_file_url(self) -> None:
        field = reference_field("field_mod_image", [image_media("/files/a.jpg")])

        assert _resolver().resolve_reference(field, field.storage, DEFAULT_MAPPINGS) == "/files/a.jpg"

    def test_first_filled_candidate_wins(self) -> None:
        """Absent and present-but-empty candidates are passed over."""
        media = entity(
            "media",
            "image",
            reference_field("field_media_image", [], type="image"),
            reference_field("field_file", [InMemoryFile(url="/files/fallback.png")], type="file"),
        )
        field = reference_field("field_mod_image", [media])

        assert _resolver().resolve_reference(field, field.storage, DEFAULT_MAPPINGS) == "/files/fallback.png"

    def test_earlier_candidate_beats_later_one(self) -> None:
        media = entity(
            "media",
            "image",
            reference_field("field_file", [InMemoryFile(url="/files/late.png")], type="file"),
            reference_field("field_media_image", [InMemoryFile(url="/files/early.png")], type="image"),
        )
        field = reference_field("field_mod_image", [media], multiple=True)

        assert _resolver().resolve_reference(field, field.storage, DEFAULT_MAPPINGS) == ["/files/early.png"]

    def test_color_term_resolves_to_rgba(self) -> None:
        field = reference_field("field_mod_bg_color", [color_term("#336699", "0.8")])

        assert _resolver().resolve_reference(field, field.storage, DEFAULT_MAPPINGS) == "rgba(51,102,153,0.8)"

    def test_other_types_use_main_property(self) -> None:
        remote = entity(
            "media",
            "remote_video",
            simple_field("field_media_oembed_video", ["https://video.example.com/1"]),
        )
        field = reference_field("field_mod_video", [remote])

        assert _resolver().resolve_reference(field, field.storage, DEFAULT_MAPPINGS) == "https://video.example.com/1"

    def test_unmapped_entities_are_skipped(self) -> None:
        stranger = entity("node", "article", simple_field("field_media_image", ["x"]))
        field = reference_field("field_mod_image", [stranger, image_media("/files/b.jpg")], multiple=True)

        assert _resolver().resolve_reference(field, field.storage, DEFAULT_MAPPINGS) == ["/files/b.jpg"]

    def test_entity_without_filled_candidate_is_skipped(self) -> None:
        bare = entity("media", "image", simple_field("field_caption", ["no file"]))
        field = reference_field("field_mod_image", [bare, image_media("/files/c.jpg")], multiple=True)

        assert _resolver().resolve_reference(field, field.storage, DEFAULT_MAPPINGS) == ["/files/c.jpg"]

    def test_values_flatten_across_entities(self) -> None:
        field = reference_field(
            "field_mod_colors",
            [color_term("#000"), color_term("#fff", "0.5")],
            multiple=True,
        )

        assert _resolver().resolve_reference(field, field.storage, DEFAULT_MAPPINGS) == [
            "rgba(0,0,0,1)",
            "rgba(255,255,255,0.5)",
        ]

    def test_single_outer_field_collapses_flattened_values(self) -> None:
        gallery = entity(
            "media",
            "image",
            reference_field(
                "field_media_image",
                [InMemoryFile(url="/files/1.jpg"), InMemoryFile(url="/files/2.jpg")],
                type="image",
                multiple=True,
            ),
        )
        field = reference_field("field_mod_image", [gallery])

        assert _resolver().resolve_reference(field, field.storage, DEFAULT_MAPPINGS) == "/files/1.jpg"

    def test_nothing_resolved_is_none(self) -> None:
        stranger = entity("node", "article")
        field = reference_field("field_mod_image", [stranger], multiple=True)

        assert _resolver().resolve_reference(field, field.storage, DEFAULT_MAPPINGS) is None

    def test_altered_mapping_is_honoured(self) -> None:
        doc = entity("media", "document", simple_field("field_media_document", ["/files/doc.pdf"]))
        field = reference_field("field_mod_doc", [doc])
        mappings = build_mappings([{"media": {"document": ["field_media_document"]}}])

        assert _resolver().resolve_reference(field, field.storage, mappings) == "/files/doc.pdf"

    def test_outer_storage_argument_decides_collapse(self) -> None:
        field = reference_field("field_mod_colors", [color_term("#000"), color_term("#fff")])
        storage = FieldStorage(type="entity_reference", main_property_name="target_id", is_multiple=True)

        assert len(_resolver().resolve_reference(field, storage, DEFAULT_MAPPINGS)) == 2
