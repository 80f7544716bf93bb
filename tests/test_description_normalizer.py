"""Tests for per-photo description normalization."""

from __future__ import annotations

from dataclasses import replace

import pytest

from core.models import OverlengthBehavior, PhotoStatus, ReplacementCharacter
from core.services.description_normalizer import (
    DescriptionNormalizer,
    correct_capitalization,
    index_digit_width,
    index_suffix_width,
    strip_trailing_numbers,
    treat_affixes,
)


def _normalize(photo, config, batch_size=1):
    DescriptionNormalizer(config, treat_affixes(config), batch_size).normalize(photo)
    return photo


class TestTextRules:
    """Individual text transformations."""

    def test_capitalization_keeps_interior_spaces(self):
        assert correct_capitalization("the big   dog") == "The Big   Dog"

    def test_capitalization_lowers_first(self):
        assert correct_capitalization("FRONT pORCH") == "Front Porch"

    def test_capitalization_only_after_space(self):
        assert correct_capitalization("north-east deck") == "North-east Deck"

    def test_capitalization_empty(self):
        assert correct_capitalization("") == ""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Kitchen (4)", "Kitchen"),
            ("Kitchen(4)", "Kitchen"),
            ("Kitchen 12", "Kitchen "),
            ("Bathroom 4 (51)", "Bathroom 4"),
            ("2nd Floor", "2nd Floor"),
        ],
    )
    def test_strip_trailing_numbers(self, text, expected):
        assert strip_trailing_numbers(text) == expected

    def test_index_widths(self):
        assert index_suffix_width(99) == 5
        assert index_suffix_width(100) == 6
        assert index_digit_width(99) == 2
        assert index_digit_width(100) == 3


class TestAffixes:
    """Prefix/suffix/fallback treatment."""

    def test_hyphen_keeps_outer_spaces(self, config):
        treated = treat_affixes(replace(config, prefix="Lot 4: ", suffix=" (east)"))
        assert treated.prefix == "Lot 4- "
        assert treated.suffix == " (east)"

    def test_nothing_collapses(self, config):
        treated = treat_affixes(
            replace(
                config,
                prefix="a  : b",
                replacement_character=ReplacementCharacter.NOTHING,
            )
        )
        assert treated.prefix == "a b"


class TestNormalize:
    """Full per-photo pass."""

    def test_trailing_number_removed(self, config, make_photos):
        (photo,) = make_photos("Kitchen (4)")
        _normalize(photo, config)
        assert photo.preferred_index == 4
        assert photo.description == "Kitchen"
        assert photo.status is PhotoStatus.READY

    def test_trailing_number_kept_when_disabled(self, config, make_photos):
        (photo,) = make_photos("Kitchen (4)")
        _normalize(photo, replace(config, remove_trailing_numbers=False))
        assert photo.description == "Kitchen (4)"

    def test_invalid_character_hyphen(self, config, make_photos):
        (photo,) = make_photos("Kitchen/Stove?")
        _normalize(photo, replace(config, correct_caps=False))
        assert photo.description == "Kitchen-Stove-"

    def test_nothing_replacement_collapses(self, config, make_photos):
        (photo,) = make_photos("living room / front")
        _normalize(photo, replace(config, replacement_character=ReplacementCharacter.NOTHING))
        assert photo.description == "Living Room Front"

    def test_multi_space_kept_without_nothing(self, config, make_photos):
        (photo,) = make_photos("the big   dog")
        _normalize(photo, config)
        assert photo.description == "The Big   Dog"

    @pytest.mark.parametrize("raw", ["", "   ", "(3)", "?!"])
    def test_empty_uses_fallback(self, config, make_photos, raw):
        (photo,) = make_photos(raw)
        _normalize(photo, replace(config, replacement_character=ReplacementCharacter.NOTHING))
        assert photo.description == "Undescribed"

    def test_prefix_and_suffix_applied(self, config, make_photos):
        (photo,) = make_photos("Garage")
        _normalize(photo, replace(config, prefix="12 Elm - ", suffix=" (old)"))
        assert photo.description == "12 Elm - Garage (old)"

    def test_customized_untouched(self, config, make_photos):
        (photo,) = make_photos("Kitchen (4)")
        photo.customized = True
        photo.description = "My own name"
        photo.status = PhotoStatus.REFUSE_SYMBOL
        _normalize(photo, config)
        assert photo.description == "My own name"
        assert photo.status is PhotoStatus.REFUSE_SYMBOL


class TestLengthPolicies:
    """Over-length handling and hard length bounds."""

    def test_truncate_to_budget(self, config, make_photos):
        (photo,) = make_photos("x" * 300)
        cfg = replace(config, over_length=OverlengthBehavior.TRUNCATE, user_max_length=64)
        _normalize(photo, cfg)
        assert len(photo.description) == 59
        assert photo.status is PhotoStatus.READY

    def test_truncate_uses_wider_index_for_large_batch(self, config, make_photos):
        (photo,) = make_photos("x" * 300)
        cfg = replace(config, over_length=OverlengthBehavior.TRUNCATE, user_max_length=64)
        _normalize(photo, cfg, batch_size=150)
        assert len(photo.description) == 58

    def test_truncate_moves_to_suffix_then_prefix(self, config, make_photos):
        (photo,) = make_photos("")
        cfg = replace(
            config,
            undescribed="",
            prefix="PPPPPPPPPP",
            suffix="SSSSSSSSSS",
            over_length=OverlengthBehavior.TRUNCATE,
            user_max_length=12,
        )
        _normalize(photo, cfg)
        # Suffix is emptied first, then the prefix is cut to fit.
        assert photo.description == "PPPPPPP"
        assert photo.status is PhotoStatus.READY

    def test_drop_vowels_first(self, config, make_photos):
        (photo,) = make_photos("Beautiful Kitchen Area")
        cfg = replace(
            config,
            correct_caps=False,
            over_length=OverlengthBehavior.DROP_VOWELS,
            user_max_length=20,
        )
        _normalize(photo, cfg)
        assert photo.description == "Btfl Ktchn r"
        assert photo.status is PhotoStatus.READY

    def test_drop_vowels_then_truncate(self, config, make_photos):
        (photo,) = make_photos("Rhythms Crypt")
        cfg = replace(
            config,
            correct_caps=False,
            over_length=OverlengthBehavior.DROP_VOWELS,
            user_max_length=12,
        )
        _normalize(photo, cfg)
        assert photo.description == "Rhythms"
        assert photo.status is PhotoStatus.READY

    def test_drop_vowels_from_suffix_when_description_has_none(self, config, make_photos):
        (photo,) = make_photos("Rhythm")
        cfg = replace(
            config,
            correct_caps=False,
            suffix=" Tour",
            over_length=OverlengthBehavior.DROP_VOWELS,
            user_max_length=14,
        )
        _normalize(photo, cfg)
        assert photo.description == "Rhythm Tr"

    def test_warn(self, config, make_photos):
        (photo,) = make_photos("x" * 100)
        _normalize(photo, replace(config, over_length=OverlengthBehavior.WARN))
        assert len(photo.description) == 100
        assert photo.status is PhotoStatus.WARNING_LENGTH

    def test_refuse(self, config, make_photos):
        (photo,) = make_photos("x" * 100)
        _normalize(photo, replace(config, over_length=OverlengthBehavior.REFUSE))
        assert photo.status is PhotoStatus.REFUSE_LENGTH

    def test_do_nothing(self, config, make_photos):
        (photo,) = make_photos("x" * 100)
        _normalize(photo, replace(config, over_length=OverlengthBehavior.DO_NOTHING))
        assert photo.status is PhotoStatus.READY

    @pytest.mark.parametrize("policy", list(OverlengthBehavior))
    def test_ceiling_always_refused(self, config, make_photos, policy):
        (photo,) = make_photos("x" * 250)
        cfg = replace(config, over_length=policy, user_max_length=400, os_max_length=400)
        _normalize(photo, cfg)
        assert photo.status is PhotoStatus.REFUSE_LENGTH

    @pytest.mark.parametrize("policy", list(OverlengthBehavior))
    def test_floor_always_refused(self, config, make_photos, policy):
        (photo,) = make_photos("ab")
        _normalize(photo, replace(config, over_length=policy))
        assert photo.status is PhotoStatus.REFUSE_LENGTH

    def test_floor_boundary(self, config, make_photos):
        (photo,) = make_photos("abc")
        _normalize(photo, config)
        assert photo.status is PhotoStatus.READY
