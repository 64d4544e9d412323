"""
Group People By Segment Query.

Returns one group per segment that has at least one person, in the order
segments first appear in the repository listing.
"""

from dataclasses import dataclass

from education_platform.application.common.interfaces import Query, QueryHandler
from education_platform.application.dto.person import PersonDTO, SegmentGroupDTO
from education_platform.domain.ports.repositories import PersonRepository
from education_platform.domain.services.segmentation import group_by_segment


@dataclass(frozen=True)
class GroupPeopleBySegmentQuery(Query[list[SegmentGroupDTO]]):
    limit: int = 100


class GroupPeopleBySegmentHandler(QueryHandler[list[SegmentGroupDTO]]):
    def __init__(self, person_repository: PersonRepository):
        self._person_repository = person_repository

    async def execute(self, query: GroupPeopleBySegmentQuery) -> list[SegmentGroupDTO]:
        people = await self._person_repository.list_all(query.limit)
        return [
            SegmentGroupDTO(
                segment=segment.value,
                people=[PersonDTO.from_entity(person) for person in members],
                total=len(members),
            )
            for segment, members in group_by_segment(people).items()
        ]
