"""
Pytest configuration and shared fixtures for declension tests
"""

import sys
from pathlib import Path

import httpx
import pytest

# Make backend packages importable as top-level modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import Settings
from ingest.clients import WiktionaryClient, create_http_client


STOL_HTML = """
<html><body>
<section>
<p><a href="/wiki/существительное">Существительное</a>, неодушевлённое, мужской род (<i>неодуш.</i>, <i>муж. р.</i>)</p>
<table class="morfotable ru">
<tbody>
<tr><th>падеж</th><th>ед. ч.</th><th>мн. ч.</th></tr>
<tr><td><a title="именительный падеж">Им.</a></td><td>сто́л</td><td>столы́</td></tr>
<tr><td><a title="родительный падеж">Р.</a></td><td>стола́</td><td>столо́в</td></tr>
<tr><td><a title="дательный падеж">Д.</a></td><td>столу́</td><td>стола́м</td></tr>
<tr><td><a title="винительный падеж">В.</a></td><td>сто́л</td><td>столы́</td></tr>
<tr><td><a title="творительный падеж">Тв.</a></td><td>столо́м</td><td>стола́ми</td></tr>
<tr><td><a title="предложный падеж">Пр.</a></td><td>столе́<sup>[1]</sup></td><td>стола́х</td></tr>
</tbody>
</table>
</section>
</body></html>
"""

KOSHKA_WIKITEXT = """==Russian==
===Etymology===
From {{inh|ru|orv|кошька}}.

===Noun===
{{ru-noun+|ко́шка|*|g=f|a=an|tr=koška}}

# [[cat]]

====Declension====
{{ru-decl-noun
|nom_sg=кошка|nom_pl=кошки
|gen_sg=кошки|gen_pl=кошек
|dat_sg=кошке|dat_pl=кошкам
|acc_sg=кошку|acc_pl=кошек
|ins_sg=кошкой|ins_pl=кошками
|prp_sg=кошке|prp_pl=кошках
}}

==Serbo-Croatian==
===Noun===
# [[basket]]
"""


@pytest.fixture
def settings():
    """Settings with short upstream timeouts for tests"""
    return Settings(
        DECLENSION_REQUEST_TIMEOUT=0.2,
        DECLENSION_CACHE_TTL=None,
        DECLENSION_MAX_CONCURRENCY=4,
        _env_file=None,
    )


@pytest.fixture
def stol_html():
    return STOL_HTML


@pytest.fixture
def koshka_wikitext():
    return KOSHKA_WIKITEXT


@pytest.fixture
def make_client(settings):
    """Build a WiktionaryClient whose network is the given request handler"""
    def _make(handler) -> WiktionaryClient:
        http = create_http_client(settings, transport=httpx.MockTransport(handler))
        return WiktionaryClient(http, settings)

    return _make


def offline_handler(request: httpx.Request) -> httpx.Response:
    """Every upstream page is missing"""
    return httpx.Response(404, text="Not Found")


@pytest.fixture
def offline_client(make_client):
    return make_client(offline_handler)
