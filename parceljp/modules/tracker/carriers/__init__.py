# -*- coding: utf-8 -*-
"""Registry of scraping adapters, keyed by carrier.

Built once at import and read-only afterwards.
"""
from types import MappingProxyType
from typing import Mapping

from parceljp.modules.tracker.carriers import fukutsu, hida, sagawa, seino, tonami, yamato
from parceljp.modules.tracker.carriers.common import CarrierAdapter


ADAPTERS: Mapping[str, CarrierAdapter] = MappingProxyType({
	module.ADAPTER.key: module.ADAPTER
	for module in (sagawa, yamato, fukutsu, seino, tonami, hida)
})
