import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import yaml

import myconstituency


class Environments(Enum):
    TEST = 'test'
    LOCAL = 'local'


@dataclass
class Config:
    http_timeout_seconds: float
    user_agent: str

    votes_index_url: str
    site_root: str
    records_host: str
    max_vote_items: int
    max_title_length: int

    represent_base_url: str
    represent_max_pages: int
    represent_page_size: int

    geocoder_url: str
    overrides_file: str

    def __init__(self, conf_data):
        http = conf_data.get('http', {})
        self.http_timeout_seconds = float(http.get('timeout_seconds', 30))
        self.user_agent = http.get('user_agent', "myconstituency")

        alberta = conf_data['alberta']
        self.votes_index_url = alberta['votes_index_url']
        self.site_root = alberta['site_root'].rstrip("/")
        self.records_host = alberta['records_host']
        self.max_vote_items = int(alberta.get('max_items', 12))
        self.max_title_length = int(alberta.get('max_title_length', 300))

        represent = conf_data['represent']
        self.represent_base_url = represent['base_url'].rstrip("/")
        self.represent_max_pages = int(represent.get('max_pages', 25))
        self.represent_page_size = int(represent.get('page_size', 500))

        self.geocoder_url = conf_data['geocoder']['url']

        overrides_file = conf_data.get('overrides_file')
        self.overrides_file = self._config_relative_file(overrides_file) if overrides_file \
            else os.path.join(os.path.dirname(myconstituency.__file__), "data", "overrides.yaml")

    def _config_relative_file(self, path):
        return os.path.join(os.path.dirname(myconstituency.__file__), "..", path)


def _create_config(environment: Environments):
    env_yaml = os.path.join(os.path.dirname(myconstituency.__file__), f"../environments/{environment.value}.yaml")
    with open(env_yaml, 'r', encoding='utf-8') as fp:
        conf_data = yaml.safe_load(fp)

    return Config(conf_data)


def load_config(environment: Optional[str] = None) -> Config:
    name = environment or os.environ.get("MC_ENVIRONMENT", Environments.LOCAL.value)
    return _create_config(Environments(name))
