# File: tests/samples.py
"""Canned page bodies and result builders shared by the test modules."""
from typing import Dict

from paw_scout.crawler.models import SourceDescriptor, SourceResult

SEAACA_PAGE = """<html><body>
<a href="/adoptions/view-our-animals/?pet_id=12-34567">Rex</a>
<a href="/adoptions/view-our-animals/?pet_id=12-99999">Mia</a>
<a href="/about-us/">About</a>
</body></html>"""

ADOPTAPET_PAGE = """<html><body>
<a href="https://www.adoptapet.com/pet/1-rex" class="card"><div class="name">Rex</div><span class="tag periodic-base">12-34567</span></a>
<a href="/pet/2-bo" class="card"><span class="x periodic-base y"> 55-12345 </span></a>
</body></html>"""

PETFINDER_JSON = {
    "result": {
        "animals": [
            {
                "animal": {
                    "organization_animal_identifier": "12-34567",
                    "social_sharing": {"email_url": "https://www.petfinder.com/dog/rex-1"},
                }
            },
            {"animal": {"organization_animal_identifier": "77-00001"}},
        ]
    }
}


def no_animals(body: bytes) -> Dict[str, str]:
    return {}


def make_result(site: str, page: str = "/", animals=None, error=None, position: int = 0) -> SourceResult:
    """SourceResult built directly, for merge tests that need no network."""
    source = SourceDescriptor(site=site, page=page, extractor=no_animals, position=position)
    if error is not None:
        return SourceResult.failed(source, error)
    return SourceResult(source=source, animals=dict(animals or {}))
