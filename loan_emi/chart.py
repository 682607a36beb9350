import logging
from typing import Optional

import plotly.graph_objects as go

from loan_emi import config
from loan_emi.formatting import format_currency

logger = logging.getLogger(__name__)

LABELS = ["Principal Amount", "Total Interest"]


class EmiChart:
    """
    Doughnut chart of principal vs total interest.

    The figure is built on the first update and its data replaced on every
    later one, so the page always renders the same figure object.
    """

    def __init__(self):
        self.figure: Optional[go.Figure] = None

    def update(self, principal: float, interest: float) -> go.Figure:
        values = [principal, interest]
        hover = [[format_currency(v)] for v in values]

        if self.figure is None:
            self.figure = self._build(values, hover)
            logger.info("EMI chart created")
        else:
            self.figure.update_traces(values=values, customdata=hover)

        return self.figure

    @staticmethod
    def _build(values, hover) -> go.Figure:
        fig = go.Figure(
            data=[
                go.Pie(
                    labels=LABELS,
                    values=values,
                    customdata=hover,
                    hole=0.6,
                    sort=False,
                    textinfo="none",
                    marker=dict(
                        colors=[config.PRINCIPAL_COLOR, config.INTEREST_COLOR],
                        line=dict(width=0),
                    ),
                    hovertemplate="%{label}: %{customdata[0]}<extra></extra>",
                )
            ]
        )
        fig.update_layout(
            showlegend=True,
            legend=dict(
                orientation="h",
                x=0.5,
                xanchor="center",
                y=-0.05,
                yanchor="top",
                font=dict(color=config.LEGEND_COLOR, family=config.CHART_FONT, size=12),
            ),
            margin=dict(t=10, b=10, l=10, r=10),
            paper_bgcolor="rgba(0,0,0,0)",
            plot_bgcolor="rgba(0,0,0,0)",
        )
        return fig
