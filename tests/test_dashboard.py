"""
Tests for score banding and report projection.
"""

import pytest

from dashboard import (
    BAND_GOOD,
    BAND_POOR,
    BAND_WARNING,
    render_report,
    score_band,
    score_bg_color,
    score_text_color,
    score_view,
)


class TestScoreBand:
    @pytest.mark.parametrize(
        "score,band",
        [(100, BAND_GOOD), (80, BAND_GOOD), (79, BAND_WARNING), (60, BAND_WARNING), (59, BAND_POOR), (0, BAND_POOR)],
    )
    def test_boundaries(self, score, band):
        assert score_band(score) == band

    def test_fractional_scores(self):
        assert score_band(79.9) == BAND_WARNING
        assert score_band(59.5) == BAND_POOR

    def test_colour_tiers(self):
        assert (score_text_color(85), score_bg_color(85)) == ("text-green-600", "bg-green-100")
        assert (score_text_color(65), score_bg_color(65)) == ("text-yellow-600", "bg-yellow-100")
        assert (score_text_color(10), score_bg_color(10)) == ("text-red-600", "bg-red-100")

    def test_score_label(self):
        assert score_view(72).label == "72/100"
        assert score_view(72.5).label == "72.5/100"


class TestRenderReport:
    def test_header(self, analysis_data):
        report = render_report(analysis_data)
        assert report.header.url == "https://example.com"
        assert report.header.title == "Example Domain"
        assert report.header.overall.label == "72/100"
        assert report.header.overall.band == BAND_WARNING

    def test_title_falls_back(self, analysis_data):
        analysis_data["metadata"] = {}
        assert render_report(analysis_data).header.title == "Website Analysis"

    def test_priority_actions_keep_order_and_are_one_indexed(self, analysis_data):
        actions = render_report(analysis_data).priority_actions
        assert [(a.position, a.text) for a in actions] == [
            (1, "Add meta description"),
            (2, "Fix canonical tag"),
            (3, "Expand content"),
        ]

    def test_overview_cards(self, analysis_data):
        overview = render_report(analysis_data).tabs.overview
        assert [card.title for card in overview.cards] == [
            "Title SEO",
            "Meta Description",
            "Content Quality",
            "Technical SEO",
        ]
        assert [card.score.band for card in overview.cards] == [BAND_GOOD, BAND_POOR, BAND_WARNING, BAND_POOR]
        assert overview.insights[0].position == 1

    def test_title_meta_tab(self, analysis_data):
        tab = render_report(analysis_data).tabs.title
        assert tab.title_tag.length == "42 characters"
        assert tab.title_tag.issues == ["Title does not include primary keyword"]
        assert tab.meta_description.exists is False
        assert tab.meta_description.exists_label == "No"

    def test_content_keywords_technical_tabs(self, analysis_data):
        tabs = render_report(analysis_data).tabs
        assert tabs.content.word_count == "640 words"
        assert tabs.content.heading_structure == {"h1": 1, "h2": 4}
        assert tabs.keywords.extracted == ["seo", "analysis"]
        assert tabs.keywords.suggested == ["seo audit tool"]
        assert tabs.technical.improvements == ["Add a canonical link element"]

    def test_render_does_not_mutate_record(self, analysis_data, seo_analysis):
        render_report(analysis_data)
        assert analysis_data["seoAnalysis"] == seo_analysis
