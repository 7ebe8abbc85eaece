import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pydantic import BaseModel, ValidationError

from ..errors import InternalFaultError, NotFoundError
from ..resources import CROSS_REFERENCES, RESOURCES, Resource
from .seed_data import default_seed

logger = logging.getLogger(__name__)

SeedLoader = Callable[[], Mapping[str, list[dict]]]


@dataclass(frozen=True)
class Collection:
    resource: Resource
    records: tuple[BaseModel, ...]
    by_id: Mapping[int, BaseModel]

    @property
    def name(self) -> str:
        return self.resource.name

    def __len__(self) -> int:
        return len(self.records)


def build_collection(resource: Resource, rows: Iterable[dict]) -> Collection:
    """Validate seed rows into frozen records, assigning ids to rows without one.

    Missing ids continue after the highest id present in the seed, so an id is
    never handed out twice.
    """
    rows = list(rows)
    for row in rows:
        if not isinstance(row, dict):
            raise ValueError(f"Invalid {resource.singular} record {row!r}: expected an object")

    def validate(data: dict) -> BaseModel:
        try:
            return resource.model.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid {resource.singular} record {data!r}: {e}") from e

    # Rows carrying an id are validated first so coerced ids ("2") count
    slots: list[BaseModel | None] = [
        validate(row) if row.get("id") is not None else None for row in rows
    ]
    next_id = max((record.id for record in slots if record is not None), default=0) + 1
    for i, row in enumerate(rows):
        if slots[i] is None:
            slots[i] = validate({**row, "id": next_id})
            next_id += 1

    by_id = {}
    for record in slots:
        if record.id in by_id:
            raise ValueError(f"Duplicate {resource.singular} id {record.id}")
        by_id[record.id] = record

    return Collection(resource=resource, records=tuple(slots), by_id=MappingProxyType(by_id))


class ResourceStore:
    """Named read-only collections, loaded once from a seed.

    Reads before ``initialize`` fail with ``InternalFaultError``; after it the
    collections never change, so concurrent readers need no locking.
    """

    def __init__(
        self,
        seed_loader: SeedLoader = default_seed,
        resources: Iterable[Resource] = RESOURCES,
        check_references: bool = True,
    ):
        self._seed_loader = seed_loader
        self._resources = {resource.name: resource for resource in resources}
        self._check_references = check_references
        self._collections: Mapping[str, Collection] | None = None
        self._lock = threading.Lock()

    @property
    def ready(self) -> bool:
        return self._collections is not None

    @property
    def resources(self) -> tuple[Resource, ...]:
        return tuple(self._resources.values())

    def initialize(self) -> None:
        if self._collections is not None:
            return

        with self._lock:
            # Double-check after acquiring lock
            if self._collections is not None:
                return

            seed = self._seed_loader()
            collections = {}
            for name, resource in self._resources.items():
                collections[name] = build_collection(resource, seed.get(name, []))
                logger.info("Loaded %d %s", len(collections[name]), name)

            ignored = sorted(set(seed) - set(self._resources))
            if ignored:
                logger.warning("Ignoring undeclared seed collections: %s", ", ".join(ignored))

            self._collections = MappingProxyType(collections)

        if self._check_references:
            for ref in self.dangling_references():
                logger.warning(
                    "%s %d references unknown %s '%s'",
                    ref["collection"], ref["id"], ref["field"], ref["value"],
                )

    def get_collection(self, name: str) -> Collection:
        collections = self._collections
        if collections is None:
            raise InternalFaultError("resource store not initialized")
        try:
            return collections[name]
        except KeyError:
            raise NotFoundError(f"collection '{name}'") from None

    def get_by_id(self, collection_name: str, record_id: int) -> BaseModel:
        collection = self.get_collection(collection_name)
        record = collection.by_id.get(record_id)
        if record is None:
            raise NotFoundError(collection.resource.singular)
        return record

    def dangling_references(self) -> list[dict]:
        """Records whose cross-reference value matches nothing in the target collection."""
        dangling = []
        for source, field, target, target_field in CROSS_REFERENCES:
            if source not in self._resources or target not in self._resources:
                continue
            known = {getattr(r, target_field) for r in self.get_collection(target).records}
            for record in self.get_collection(source).records:
                value = getattr(record, field)
                if value not in known:
                    dangling.append(
                        {"collection": source, "id": record.id, "field": field, "value": value}
                    )
        return dangling
