"""
Visualizer for Token Streams
Plots the tokens of an expression against bracket depth using Plotly
"""

import logging
from typing import Dict, List, Tuple

import plotly.graph_objects as go

from config import VISUALIZER_CONFIG
from tokenizer import Tokenizer
from tokens import Token, Number, Operator, Bracket

logger = logging.getLogger(__name__)


def token_kind(token: Token) -> str:
    """Classify a token as 'number', 'operator' or 'bracket'."""
    if isinstance(token, Number):
        return "number"
    if isinstance(token, Operator):
        return "operator"
    if isinstance(token, Bracket):
        return "bracket"
    raise TypeError(f"Not a token: {token!r}")


def depth_profile(tokens: List[Token]) -> List[int]:
    """
    Bracket depth at each token.

    A '(' is drawn at the depth it opens, a ')' at the depth it closes,
    so matching brackets sit at the same height.
    """
    depths = []
    depth = 0
    for token in tokens:
        if isinstance(token, Bracket) and token.is_left:
            depth += 1
            depths.append(depth)
        elif isinstance(token, Bracket):
            depths.append(depth)
            depth -= 1
        else:
            depths.append(depth)
    return depths


class TokenVisualizer:
    """Creates an interactive view of a tokenized expression"""

    def __init__(self, expression: str, tokens: List[Token] = None,
                 implicit_indices: List[int] = None):
        """
        Args:
            expression: Source expression, used for the title
            tokens: Pre-computed tokens; the expression is tokenized if omitted
            implicit_indices: Indices of synthesized '*' tokens in tokens
        """
        self.expression = expression
        if tokens is None:
            tokenizer = Tokenizer()
            tokens = tokenizer.tokenize(expression)
            implicit_indices = tokenizer.implicit_indices
        self.tokens = tokens
        self.implicit_indices = set(implicit_indices or [])

    def _group_points(self, depths: List[int]) -> Dict[str, List[Tuple[int, int, str]]]:
        """Split (index, depth, symbol) points into one group per marker trace."""
        groups = {"number": [], "operator": [], "bracket": [], "implicit": []}
        for i, (token, depth) in enumerate(zip(self.tokens, depths)):
            kind = "implicit" if i in self.implicit_indices else token_kind(token)
            groups[kind].append((i, depth, str(token)))
        return groups

    def build_figure(self) -> go.Figure:
        """Build the Plotly figure."""
        colors = VISUALIZER_CONFIG["colors"]
        depths = depth_profile(self.tokens)

        fig = go.Figure()

        # Depth profile underneath the tokens
        fig.add_trace(go.Scatter(
            x=list(range(len(self.tokens))),
            y=depths,
            mode='lines',
            line=dict(color=colors["depth"], width=2, shape='hv'),
            hoverinfo='skip',
            name='Depth',
            showlegend=True
        ))

        names = {
            "number": 'Number',
            "operator": 'Operator',
            "bracket": 'Bracket',
            "implicit": 'Implicit *',
        }
        for kind, points in self._group_points(depths).items():
            if not points:
                continue
            fig.add_trace(go.Scatter(
                x=[p[0] for p in points],
                y=[p[1] for p in points],
                mode='markers+text',
                marker=dict(
                    size=VISUALIZER_CONFIG["marker_size"],
                    color=colors[kind],
                    symbol='diamond' if kind == "implicit" else 'circle'
                ),
                text=[p[2] for p in points],
                textposition='middle center',
                textfont=dict(size=14, color='white'),
                hoverinfo='text',
                hovertext=[f"{names[kind]} '{p[2]}' (token {p[0]}, depth {p[1]})" for p in points],
                name=names[kind],
                showlegend=True
            ))

        fig.update_layout(
            title=dict(
                text=VISUALIZER_CONFIG["title"].format(expression=self.expression) +
                     f"<br><sup>Tokens: {len(self.tokens)} | "
                     f"Implicit multiplications: {len(self.implicit_indices)} | "
                     f"Max depth: {max(depths, default=0)}</sup>",
                x=0.5,
                font=dict(size=18)
            ),
            height=VISUALIZER_CONFIG["height"],
            hovermode='closest',
            xaxis=dict(showgrid=False, zeroline=False, title='Token'),
            yaxis=dict(showgrid=True, zeroline=True, dtick=1, title='Bracket depth'),
            plot_bgcolor='white',
            paper_bgcolor='#f5f5f5',
            margin=dict(l=40, r=40, t=80, b=40)
        )
        return fig

    def generate_html(self, output_file: str = None) -> str:
        """
        Write the figure to an HTML file.

        Args:
            output_file: Path to save HTML file

        Returns:
            The path written
        """
        output_file = output_file or VISUALIZER_CONFIG["output_file"]
        self.build_figure().write_html(output_file)
        logger.info("Token stream visualization saved to: %s", output_file)
        return output_file
