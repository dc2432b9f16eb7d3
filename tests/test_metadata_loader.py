"""Tests for phonecheck.metadata.loader — YAML region files."""
from __future__ import annotations

import textwrap

import pytest

from phonecheck.metadata.loader import (
    DEFAULT_DATA_DIR,
    load_all_regions,
    load_region,
    read_version,
    region_from_dict,
)
from phonecheck.metadata.region import NumberType

_VALID = textwrap.dedent("""\
    region_code: gb
    country_calling_code: 44
    national_prefix: "0"
    international_prefix: "00"
    possible_lengths: [10]
    general_pattern: '[1-9]\\d{9}'
    number_types:
      - type: mobile
        pattern: '7\\d{9}'
    format_rules:
      - leading_digits: '2'
        pattern: '(\\d{2})(\\d{4})(\\d{4})'
        national: '\\1 \\2 \\3'
        with_national_prefix: false
""")


def _write(tmp_path, name: str, content: str):
    f = tmp_path / name
    f.write_text(content, encoding="utf-8")
    return f


class TestLoadRegion:
    def test_valid_yaml_loads_correctly(self, tmp_path):
        region = load_region(_write(tmp_path, "gb.yaml", _VALID))

        assert region.region_code == "GB"
        assert region.country_calling_code == 44
        assert region.is_main_region_for_code is True
        assert region.national_prefix == "0"
        assert region.international_prefix == "00"
        assert region.possible_lengths == frozenset({10})
        assert region.number_types == ((NumberType.MOBILE, r"7\d{9}"),)
        assert len(region.format_rules) == 1
        rule = region.format_rules[0]
        assert rule.leading_digits == "2"
        assert rule.national_template == r"\1 \2 \3"
        assert rule.international_template is None
        assert rule.national_prefix_formatting is False

    def test_missing_required_field_raises(self, tmp_path):
        f = _write(tmp_path, "broken.yaml", "region_code: XX\ncountry_calling_code: 1\n")
        with pytest.raises(ValueError, match="missing required fields"):
            load_region(f)

    def test_unknown_field_raises(self, tmp_path):
        f = _write(tmp_path, "extra.yaml", _VALID + "carrier: Vodafone\n")
        with pytest.raises(ValueError, match="unknown fields"):
            load_region(f)

    def test_not_a_mapping_raises(self, tmp_path):
        f = _write(tmp_path, "list.yaml", "- GB\n- DE\n")
        with pytest.raises(ValueError, match="expected a YAML mapping"):
            load_region(f)

    def test_unknown_number_type_raises(self, tmp_path):
        f = _write(tmp_path, "bad.yaml", _VALID.replace("type: mobile", "type: satellite"))
        with pytest.raises(ValueError, match="unknown number type"):
            load_region(f)

    def test_invalid_regex_names_the_file(self, tmp_path):
        f = _write(tmp_path, "regex.yaml", _VALID.replace("'[1-9]\\d{9}'", "'[1-9\\d{9}'"))
        with pytest.raises(ValueError, match="regex.yaml"):
            load_region(f)

    def test_format_rule_missing_template_raises(self, tmp_path):
        f = _write(tmp_path, "rule.yaml", _VALID.replace("    national: '\\1 \\2 \\3'\n", ""))
        with pytest.raises(ValueError, match="missing fields"):
            load_region(f)

    def test_invariant_violation_names_the_file(self, tmp_path):
        f = _write(tmp_path, "len.yaml", _VALID.replace("possible_lengths: [10]", "possible_lengths: [9]"))
        with pytest.raises(ValueError, match="len.yaml.*outside possible_lengths"):
            load_region(f)


class TestRegionFromDict:
    def test_scalar_possible_length_accepted(self):
        region = region_from_dict({
            "region_code": "SG",
            "country_calling_code": 65,
            "possible_lengths": 8,
            "general_pattern": r"[689]\d{7}",
        })
        assert region.possible_lengths == frozenset({8})

    def test_non_digit_prefix_rejected(self):
        with pytest.raises(ValueError, match="national_prefix must be a digit string"):
            region_from_dict({
                "region_code": "SG",
                "country_calling_code": 65,
                "possible_lengths": [8],
                "general_pattern": r"[689]\d{7}",
                "national_prefix": "0x",
            })


class TestLoadAllRegions:
    def test_sorted_by_filename_and_non_yaml_skipped(self, tmp_path):
        _write(tmp_path, "b.yaml", "region_code: BB\ncountry_calling_code: 22\npossible_lengths: [6]\ngeneral_pattern: '\\d{6}'\n")
        _write(tmp_path, "a.yml", "region_code: AA\ncountry_calling_code: 33\npossible_lengths: [6]\ngeneral_pattern: '\\d{6}'\n")
        _write(tmp_path, "notes.txt", "ignored")

        regions = load_all_regions(tmp_path)
        assert [r.region_code for r in regions] == ["AA", "BB"]

    def test_packaged_data_set_loads(self):
        regions = load_all_regions(DEFAULT_DATA_DIR)
        assert len(regions) >= 20
        assert all(r.possible_lengths for r in regions)


class TestReadVersion:
    def test_packaged_version(self):
        assert read_version(DEFAULT_DATA_DIR) == "2026.10"

    def test_missing_version_file(self, tmp_path):
        assert read_version(tmp_path) == "unversioned"
