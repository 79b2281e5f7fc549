"""Tests for the individual rating passes and their registry."""

import pytest

from domain_rater import config
from domain_rater.domain import parse
from domain_rater.features.passes.main_domain import MainDomainFeature
from domain_rater.features.passes.protocol import ProtocolFeature
from domain_rater.features.passes.subdomain import SubDomainFeature
from domain_rater.features.passes.tld import TLDFeature
from domain_rater.features.registry import PASSES
from domain_rater.scoring.report import RatingReport


def rate(feature, raw: str) -> RatingReport:
    report = RatingReport()
    feature.rate(parse(raw), report)
    return report


class TestRegistry:
    def test_passes_run_in_order(self) -> None:
        assert [f.name for f in PASSES] == ["protocol", "subdomain", "main_domain", "tld"]


class TestProtocol:
    @pytest.mark.parametrize(
        "raw, message, score",
        [
            ("example.com", "\t[+0] No web protocol specified.", 0),
            ("http://example.com", "\t[+5] Unsecured connection protocol.", 5),
            ("HTTP://example.com", "\t[+5] Unsecured connection protocol.", 5),
            ("https://example.com", "\t[+0] Secured connection protocol.", 0),
            ("ftp://example.com", "\t[+0] File transfer protocol.", 0),
            ("gopher://example.com", "\t[+0] Unknown protocol.", 0),
        ],
    )
    def test_protocols(self, raw: str, message: str, score: int) -> None:
        report = rate(ProtocolFeature(), raw)
        assert report.messages[3:] == [message]
        assert report.score == score

    def test_header(self) -> None:
        assert rate(ProtocolFeature(), "https://a.b").messages[:3] == ["", "Domain Protocol (https)", ""]
        assert rate(ProtocolFeature(), "a.b").messages[1] == "Domain Protocol ()"


class TestSubDomain:
    def test_none(self) -> None:
        report = rate(SubDomainFeature(), "example.com")
        assert report.messages == ["", "Subdomain ()", "", "\t[+0] There is no subdomain."]
        assert report.score == 0

    def test_www(self) -> None:
        report = rate(SubDomainFeature(), "www.example.com")
        assert report.messages[3:] == ["\t[+0] Default subdomain."]
        assert report.score == 0

    def test_www_is_only_default_on_its_own(self) -> None:
        report = rate(SubDomainFeature(), "www.shop.example.com")
        assert "\t[+9] Length of www: 3 characters" in report.messages

    def test_each_level_is_rated(self) -> None:
        report = rate(SubDomainFeature(), "x.y.example.com")
        assert report.messages[3:] == [
            "\t[+1] Length of x: 1 characters",
            "\t[+20] 1 characters from [bvkxjqz]",
            "\t[+1] Length of y: 1 characters",
            "\t[+15] 1 characters from [cumwfgyp]",
        ]
        assert report.score == 37

    def test_malformed_level(self) -> None:
        report = rate(SubDomainFeature(), "a..b.example.com")
        assert report.messages[3:] == [
            "\t[+1] Length of a: 1 characters",
            "\t[+10] 1 characters from [etaoinshrdl]",
            "\t[+0] Malformed subdomain.",
            "\t[+1] Length of b: 1 characters",
            "\t[+20] 1 characters from [bvkxjqz]",
        ]
        assert report.score == 32


class TestMainDomain:
    def test_rates_main_label(self) -> None:
        report = rate(MainDomainFeature(), "shop.example.com")
        assert report.messages[1] == "Main Domain (example)"
        assert report.score == 164


class TestTLD:
    @pytest.mark.parametrize(
        "raw, score",
        [
            ("example.com", 3),
            ("example.net", 8),
            ("example.org", 8),
            ("example.edu", 3),
            ("example.gov", 3),
            ("example.mil", 3),
            ("example.int", 3),
            ("example.uk", 12),
            ("example.va", 12),
            ("example.io", 37),
            ("example.tk", 37),
            ("example.xyz", 48),
            ("example.museum", 51),
            ("example.c", 46),
        ],
    )
    def test_scores(self, raw: str, score: int) -> None:
        assert rate(TLDFeature(), raw).score == score

    def test_length_message_first(self) -> None:
        report = rate(TLDFeature(), "example.io")
        assert report.messages == [
            "",
            "Top Level Domain (io)",
            "",
            "\t[+2] Number of characters in TLD",
            "\t[+35] Country-level TLD with few or no restrictions. These often are marked as spam websites.",
        ]

    def test_restricted_country_codes(self) -> None:
        assert len(TLDFeature.RESTRICTED_CCTLDS) == 20
        assert all(len(code) == 2 for code in TLDFeature.RESTRICTED_CCTLDS)

    def test_weight_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "CONFIG", {"tld": {"unknown": 100}})
        assert rate(TLDFeature(), "example.xyz").score == 103

    def test_shared_passes_follow_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        tld = next(f for f in PASSES if f.name == "tld")
        monkeypatch.setattr(config, "CONFIG", {"tld": {"open_cctld": 0}})
        assert rate(tld, "example.io").score == 2


class TestProtocolWeight:
    def test_http_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        protocol = next(f for f in PASSES if f.name == "protocol")
        monkeypatch.setattr(config, "CONFIG", {"protocol": {"http": 50}})
        assert rate(protocol, "http://example.com").score == 50
