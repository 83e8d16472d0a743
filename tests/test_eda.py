"""Tests for catsum/eda -- bar charts and styled tables."""
import matplotlib.pyplot as plt
from matplotlib.colors import to_hex
import pandas as pd
import pytest

from catsum.eda import (
    CATEGORY_PALETTE,
    PALETTE,
    apply_style,
    bar_chart,
    bar_colors,
    format_cells,
    palette_for,
    render_table,
    save_figure,
)


@pytest.fixture
def ranked():
    return pd.DataFrame({
        "religion": ["Christianity", "Islam", "Other"],
        "followers": [2400.0, 1900.0, 545.0],
        "pct": [49.5, 39.2, 11.3],
        "rank": [1, 2, 3],
    })


@pytest.fixture
def grouped():
    return pd.DataFrame({
        "educ": ["Bachelor", "Graduate", "Graduate", "Bachelor"],
        "steak_prep": ["Medium rare", "Medium rare", "Well", "Medium"],
        "pct": [66.7, 50.0, 50.0, 33.3],
    })


class TestBarChart:
    def test_simple(self, ranked):
        fig = bar_chart(ranked, "religion", "pct", title="Shares")
        fig.canvas.draw()
        ax = fig.axes[0]
        assert [t.get_text() for t in ax.get_xticklabels()] == ["Christianity", "Islam", "Other"]
        assert len(ax.patches) == 3

    def test_horizontal_first_row_on_top(self, ranked):
        fig = bar_chart(ranked, "religion", "pct", horizontal=True, percent=True)
        fig.canvas.draw()
        ax = fig.axes[0]
        assert ax.yaxis_inverted()
        assert [t.get_text() for t in ax.get_yticklabels()] == ["Christianity", "Islam", "Other"]

    def test_facets(self, grouped):
        fig = bar_chart(grouped, "steak_prep", "pct", facet="educ")
        visible = [ax for ax in fig.axes if ax.get_visible()]
        assert [ax.get_title() for ax in visible] == ["Bachelor", "Graduate"]

    def test_facet_grid_hides_spare_axes(self):
        df = pd.DataFrame({"f": list("abcd"), "x": ["p"] * 4, "y": [1, 2, 3, 4]})
        fig = bar_chart(df, "x", "y", facet="f", facet_cols=3)
        assert len(fig.axes) == 6
        assert sum(ax.get_visible() for ax in fig.axes) == 4

    def test_stacked_hue_legend(self, grouped):
        fig = bar_chart(grouped, "educ", "pct", hue="steak_prep", stacked=True, horizontal=True)
        ax = fig.axes[0]
        # 2 education levels x 3 preparations
        assert len(ax.patches) == 6
        assert len(fig.legends) == 1

    def test_highlight_other(self, ranked):
        fig = bar_chart(ranked, "religion", "pct", horizontal=True, highlight=["Other"])
        colors = [to_hex(p.get_facecolor()) for p in fig.axes[0].patches]
        assert colors == [PALETTE["bar"], PALETTE["bar"], PALETTE["accent"]]

    def test_empty_facet_table(self):
        df = pd.DataFrame({"f": [], "x": [], "y": []})
        fig = bar_chart(df, "x", "y", facet="f")
        assert len(fig.axes) == 1
        assert not fig.axes[0].patches

    def test_missing_column(self, ranked):
        with pytest.raises(ValueError, match="missing columns"):
            bar_chart(ranked, "religion", "share")

    def test_save(self, ranked, tmp_path):
        fig = bar_chart(ranked, "religion", "pct")
        out = save_figure(fig, tmp_path / "nested" / "shares.png")
        assert out.exists()
        assert not plt.fignum_exists(fig.number)


class TestTables:
    def test_format_cells(self, ranked):
        out = format_cells(ranked, {"followers": "{:,.0f}", "pct": lambda v: f"{v:.0f}%"})
        assert out["followers"].tolist() == ["2,400", "1,900", "545"]
        assert out["pct"].tolist() == ["50%", "39%", "11%"]
        assert out["religion"].iloc[0] == "Christianity"

    def test_format_null_blank(self):
        out = format_cells(pd.DataFrame({"a": [1.0, None]}), {"a": "{:.1f}"})
        assert out["a"].tolist() == ["1.0", ""]

    def test_render_table_text(self, ranked):
        fig = render_table(
            ranked,
            title="Followers",
            subtitle="Top religions",
            source="Source: survey",
            columns={"rank": "#", "religion": "Religion", "pct": "Share"},
        )
        texts = [t.get_text() for t in fig.texts]
        assert texts == ["Followers", "Top religions", "Source: survey"]
        table = fig.axes[0].tables[0]
        assert table[0, 1].get_text().get_text() == "Religion"
        assert table[1, 1].get_text().get_text() == "Christianity"

    def test_render_table_missing_column(self, ranked):
        with pytest.raises(ValueError):
            render_table(ranked, title="t", columns={"nope": "Nope"})

    def test_render_empty(self, ranked):
        fig = render_table(ranked.iloc[0:0], title="Empty")
        assert not fig.axes[0].tables


def test_style_and_palette():
    apply_style()
    assert palette_for(len(CATEGORY_PALETTE) + 1)[-1] == CATEGORY_PALETTE[0]


def test_bar_colors():
    assert bar_colors(["a", "Other", 3], highlight=["Other", "3"]) == [
        PALETTE["bar"],
        PALETTE["accent"],
        PALETTE["accent"],
    ]
    assert bar_colors(["a"]) == [PALETTE["bar"]]
