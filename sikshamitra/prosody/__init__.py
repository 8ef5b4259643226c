"""Holding and pause locators."""

from sikshamitra.prosody.holdings import application_order, find_all_holdings, find_holding
from sikshamitra.prosody.pauses import find_all_pauses
from sikshamitra.prosody.stats import text_stats


__all__ = ['application_order', 'find_all_holdings', 'find_all_pauses', 'find_holding', 'text_stats']
