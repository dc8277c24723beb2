from typing import Any, Dict

import plotly.graph_objects as go


def build_bar_figure(chart_data: Dict[str, Any], title: str = "Stock Quantity by Item") -> go.Figure:
    """Return a plotly bar chart for ``{labels, datasets}`` chart data."""
    fig = go.Figure()
    for dataset in chart_data.get("datasets", []):
        style = dataset.get("style", {})
        fig.add_trace(
            go.Bar(
                x=chart_data.get("labels", []),
                y=dataset.get("data", []),
                name=dataset.get("label"),
                marker_color=style.get("background_color"),
                marker_line_color=style.get("border_color"),
                marker_line_width=style.get("border_width", 0),
                hovertemplate="<b>%{x}</b><br>Quantity: %{y}<extra></extra>",
            )
        )
    fig.update_layout(title=title, height=400, showlegend=True)
    fig.update_xaxes(tickangle=45)
    fig.update_yaxes(rangemode="tozero")
    return fig
