import logging
from dataclasses import dataclass, field
from typing import Dict, List

import yaml

from myconstituency.model import Representative
from myconstituency.representatives.postal import normalize_postal
from myconstituency.representatives.provinces import normalize_province_code
from myconstituency.serialization import json_dict_to_representative

logger = logging.getLogger(__name__)

BUCKETS = ("municipal", "provincial", "federal")


@dataclass
class Override:
    bucket: str
    representative: Representative


@dataclass
class Overrides:
    by_province: Dict[str, List[Override]] = field(default_factory=dict)
    by_postal: Dict[str, List[Override]] = field(default_factory=dict)

    def for_province(self, province_code) -> List[Override]:
        return self.by_province.get(normalize_province_code(province_code) or "", [])

    def for_postal(self, postal) -> List[Override]:
        return self.by_postal.get(normalize_postal(postal), [])


def load_overrides(path: str) -> Overrides:
    with open(path, 'r', encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}

    overrides = Overrides(
        by_province={normalize_province_code(k) or str(k).upper(): _json_list_to_overrides(v)
                     for k, v in (data.get("provinces") or {}).items()},
        by_postal={normalize_postal(str(k)): _json_list_to_overrides(v)
                   for k, v in (data.get("postal_codes") or {}).items()},
    )
    logger.debug("loaded overrides for %d provinces and %d postal codes from %s",
                 len(overrides.by_province), len(overrides.by_postal), path)
    return overrides


def _json_list_to_overrides(entries) -> List[Override]:
    result = []
    for entry in entries or []:
        bucket = entry.get("bucket")
        if bucket not in BUCKETS:
            raise ValueError(f"unknown bucket in overrides: {bucket}")
        result.append(Override(bucket, json_dict_to_representative(entry["representative"])))
    return result
