"""Tests for component name normalization."""

from __future__ import annotations

import pytest

from autocomponents.errors import NormalizationError
from autocomponents.naming import camel_case, normalize, upper_first


# === normalize() ===


class TestNormalize:
    def test_hyphenated_js(self) -> None:
        """Hyphen-separated stems become PascalCase."""
        assert normalize("vue-date-picker.js") == "VueDatePicker"

    def test_underscored_vue(self) -> None:
        """Underscore-separated stems become PascalCase."""
        assert normalize("vue_modal.vue") == "VueModal"

    def test_leading_dot_slash_stripped(self) -> None:
        """A leading ./ is removed and existing PascalCase is preserved."""
        assert normalize("./VueIcon.vue") == "VueIcon"

    def test_python_file(self) -> None:
        assert normalize("./vue-button.py") == "VueButton"

    def test_no_delimiters(self) -> None:
        """A stem without delimiters only gets its first letter capitalized."""
        assert normalize("button.py") == "Button"

    def test_only_last_extension_removed(self) -> None:
        """With several dots only the final suffix is stripped."""
        assert normalize("vue-chart.min.js") == "VueChartMin"

    def test_no_extension(self) -> None:
        assert normalize("./vue-card") == "VueCard"

    def test_only_one_dot_slash_stripped(self) -> None:
        """Only a single leading ./ is removed; the rest is delimiter noise."""
        assert normalize("././vue-card.py") == "VueCard"

    def test_mixed_delimiters(self) -> None:
        assert normalize("vue-data_table.py") == "VueDataTable"

    def test_upper_case_words_lowered(self) -> None:
        """Upper-case words are lower-cased before capitalization."""
        assert normalize("VUE-BUTTON.py") == "VueButton"

    def test_acronym_followed_by_word(self) -> None:
        assert normalize("XMLHttp-request.py") == "XmlHttpRequest"

    def test_digits_split_from_letters(self) -> None:
        assert normalize("vue2-icon.py") == "Vue2Icon"

    def test_ordinal_kept_whole(self) -> None:
        """Ordinals stay one word instead of splitting digits from suffix."""
        assert normalize("vue-1st-item.py") == "Vue1stItem"
        assert normalize("vue-4th-step.py") == "Vue4thStep"

    def test_repeated_delimiters_collapse(self) -> None:
        assert normalize("vue--icon__big.py") == "VueIconBig"

    def test_deterministic(self) -> None:
        """Repeated calls with the same path return the same name."""
        results = {normalize("./vue-date-picker.py") for _ in range(5)}
        assert results == {"VueDatePicker"}


class TestNormalizeEmptyStem:
    def test_extension_only_raises(self) -> None:
        """A file that is only an extension has no stem."""
        with pytest.raises(NormalizationError):
            normalize("./.py")

    def test_delimiters_only_raises(self) -> None:
        with pytest.raises(NormalizationError) as exc_info:
            normalize("./-_-.py")
        assert exc_info.value.details["path"] == "./-_-.py"

    def test_empty_string_raises(self) -> None:
        with pytest.raises(NormalizationError):
            normalize("")


# === camel_case() / upper_first() ===


class TestCamelCase:
    def test_hyphens(self) -> None:
        assert camel_case("vue-date-picker") == "vueDatePicker"

    def test_pascal_input(self) -> None:
        assert camel_case("VueIcon") == "vueIcon"

    def test_upper_case_ordinal(self) -> None:
        assert camel_case("2ND-place") == "2ndPlace"

    def test_ordinal_after_word(self) -> None:
        assert camel_case("vue2nd") == "vue2nd"

    def test_all_caps(self) -> None:
        assert camel_case("ABC") == "abc"

    def test_empty(self) -> None:
        assert camel_case("") == ""


class TestUpperFirst:
    def test_capitalizes_first_only(self) -> None:
        assert upper_first("vueIcon") == "VueIcon"

    def test_empty(self) -> None:
        assert upper_first("") == ""

    def test_digit_first(self) -> None:
        assert upper_first("2col") == "2col"
