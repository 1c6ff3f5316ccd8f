"""
RainCheck - Segmentación de eventos de tormenta a partir de registros de lluvia.

Ingiere mediciones de precipitación irregulares (CSV, SWMM .dat, SWMM .tsf),
las une sin duplicados y deriva eventos de tormenta con sus intensidades pico.
"""

__version__ = "0.1.0"
