"""
Runeterra.

Typed Legends of Runeterra card data: card code codec, closed enumerations
that tolerate unknown values, a card model built from the data export, and a
proxy for the game client's local API.
"""

__version__ = "0.3.0"
