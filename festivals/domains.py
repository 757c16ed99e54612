# festivals/domains.py
from core.constants import DOMAIN_FESTIVALS
from core.domains import Domain, registry

from .stores import FestivalStore

FESTIVALS = registry.register(Domain(
    name=DOMAIN_FESTIVALS,
    storage_key="festivals",
    table="festivals",
    model="festivals.Festival",
    fields=(
        "name", "region", "year",
        "film_submission_deadline", "producers_hub_deadline",
        "festival_start_date", "festival_end_date",
        "number_of_days", "contacts", "website", "location",
    ),
    types={
        "year": "int",
        "film_submission_deadline": "date",
        "producers_hub_deadline": "date",
        "festival_start_date": "date",
        "festival_end_date": "date",
        "number_of_days": "int",
        "contacts": "list",
    },
    defaults={"number_of_days": 0, "contacts": []},
    optional={"website": "", "location": ""},
    store_class=FestivalStore,
))
