"""Tests for redemption codes and expiry."""

import re

from sofka_aroma.utils import MS_PER_DAY, compute_expiry, generate_code

CODE_PATTERN = re.compile(r"^SOFKA-(.+)-([A-Z0-9]{6})$")


class TestGenerateCode:
    def test_format(self):
        code = generate_code("vanilla")
        match = CODE_PATTERN.match(code)
        assert match is not None
        assert match.group(1) == "vanilla"

    def test_id_with_dashes(self):
        assert generate_code("candle-01").startswith("SOFKA-candle-01-")

    def test_suffixes_differ(self):
        """Successive codes should carry independent random suffixes."""
        codes = {generate_code("vanilla") for _ in range(50)}
        assert len(codes) > 1


class TestComputeExpiry:
    def test_adds_days_in_ms(self):
        assert compute_expiry(3, issued_at_ms=1_000) == 1_000 + 3 * 86_400_000

    def test_ms_per_day(self):
        assert MS_PER_DAY == 86_400_000

    def test_defaults_to_now(self):
        expiry = compute_expiry(1)
        assert expiry > MS_PER_DAY

    def test_fractional_days(self):
        expiry = compute_expiry(2.5, issued_at_ms=1_000)
        assert expiry == 1_000 + 216_000_000
        assert isinstance(expiry, int)
