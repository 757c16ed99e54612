# festivals/stores.py
import logging

from django.utils import timezone

from core.exceptions import SyncError
from core.store import DomainStore
from .regions import project_festival_region
from .templates import festival_from_template, generate_festivals, template_for

logger = logging.getLogger("studio.festivals")


def is_expired(festival, today):
    """True once the festival and both of its deadlines are in the past."""
    return (
        festival["festival_end_date"] < today
        and festival["film_submission_deadline"] < today
        and festival["producers_hub_deadline"] < today
    )


def plan_rollover(festivals, today):
    """
    Work out which festivals a rollover adds and which it drops.

    Every fully expired festival gets its next edition (unless that id is
    already known). Expired festivals of past years are dropped. The
    current and next year always end up with a full set of festivals.
    Returns ``(added, dropped)``.
    """
    current_year = today.year
    known = {f["id"] for f in festivals}

    added = []
    for festival in festivals:
        if not is_expired(festival, today):
            continue
        template = template_for(festival["id"])
        if template is None:
            continue
        nxt = festival_from_template(template, festival["year"] + 1)
        if nxt["id"] not in known:
            known.add(nxt["id"])
            added.append(nxt)

    dropped = [f for f in festivals if is_expired(f, today) and f["year"] < current_year]
    dropped_ids = {f["id"] for f in dropped}

    years = {f["year"] for f in festivals if f["id"] not in dropped_ids}
    years.update(f["year"] for f in added)
    for year in (current_year, current_year + 1):
        if year not in years:
            added.extend(generate_festivals(year, year))

    return added, dropped


class FestivalStore(DomainStore):
    """
    Yearly festival editions of a user.

    With no identity, or when nothing could be read, the store holds the
    generated editions of the current and next year.
    """

    def default_records(self):
        year = timezone.now().year
        return [self.domain.decode(f) for f in generate_festivals(year, year + 1)]

    def loaded(self, records):
        if records is None:
            return self.default_records()
        if records:
            return records

        defaults = self.default_records()
        try:
            self.target().insert(self.domain, self.user_id, defaults)
        except SyncError as e:
            logger.error(f"Could not save default festivals for user {self.user_id}: {e}")
        return defaults

    def load(self, user_id):
        super().load(user_id)
        if user_id:
            try:
                self.roll_forward()
            except SyncError as e:
                logger.error(f"Festival rollover failed for user {user_id}: {e}")

    def roll_forward(self, today=None):
        """Replace expired festivals with their next editions; returns (added, dropped) counts."""
        today = today or timezone.now().date()
        added, dropped = plan_rollover(self.all(), today)

        for festival in dropped:
            self.remove(festival["id"])
        if added:
            records = [self.domain.decode(f) for f in added]
            saved = self.target().insert(self.domain, self.user_id, records)
            for record in saved or records:
                self._append(record)

        if added or dropped:
            logger.info(
                f"Festival rollover for user {self.user_id}: "
                f"{len(added)} added, {len(dropped)} dropped"
            )
        return len(added), len(dropped)

    def for_region(self, region):
        return self.filter(lambda f: f.get("region") == region)

    def for_year(self, year):
        return self.filter(lambda f: f.get("year") == year)

    def for_project(self, project):
        """Festivals in the region of ``project`` (its region, else its country's)."""
        region = project_festival_region(project)
        if region is None:
            return []
        return self.for_region(region)

    def order(self, records):
        return sorted(records, key=lambda f: (f.get("festival_start_date"), f.get("name", "")))
