"""Testes dos modelos do Azure e da conversão para o esquema simplificado."""
import pytest
from pydantic import ValidationError

from meetings_api.models.azure_models import (
    AzureIteration,
    AzureListResponse,
    AzureProject,
    AzureTeamMember,
    WiqlQueryResult,
    WorkItemDetail,
)
from meetings_api.models.mappers import (
    from_azure_iterations,
    from_azure_members,
    from_azure_projects,
    from_azure_work_items,
)


def test_project_missing_required_field_fails():
    with pytest.raises(ValidationError):
        AzureProject.model_validate({"id": "p1", "name": "Meetings"})


def test_extra_keys_ignored():
    p = AzureProject.model_validate(
        {"id": "p1", "name": "Meetings", "url": "u", "state": "wellFormed", "revision": 7, "visibility": "private"}
    )
    assert from_azure_projects([p])[0].model_dump() == {"id": "p1", "name": "Meetings", "description": None}


def test_list_envelope_requires_value():
    with pytest.raises(ValidationError):
        AzureListResponse[AzureProject].model_validate({"count": 0})


def test_wiql_ids_keep_azure_order():
    r = WiqlQueryResult.model_validate({"queryType": "flat", "workItems": [{"id": 205, "url": "u"}, {"id": 101}]})
    assert r.ids == [205, 101]


def test_members_use_unique_name_as_email():
    m = AzureTeamMember.model_validate(
        {"identity": {"id": "m1", "displayName": "Ana", "uniqueName": "ana@databriz.ru", "imageUrl": "img"}}
    )
    member = from_azure_members([m])[0]
    assert member.email == "ana@databriz.ru"
    assert member.model_dump(by_alias=True)["imageUrl"] == "img"


def test_iterations_flatten_dates():
    it = AzureIteration.model_validate(
        {
            "id": "i1",
            "name": "Sprint 1",
            "path": "Meetings\\Sprint 1",
            "attributes": {"startDate": "2020-02-01T00:00:00Z", "finishDate": "2020-02-14T00:00:00Z", "timeFrame": "past"},
            "url": "u",
        }
    )
    out = from_azure_iterations([it])[0]
    assert out.start_date == "2020-02-01T00:00:00Z"
    assert out.finish_date == "2020-02-14T00:00:00Z"


def test_work_items_content_unchanged():
    fields = {"System.Title": "Login", "System.State": "Active", "System.AssignedTo": {"uniqueName": "ana@databriz.ru"}}
    wi = WorkItemDetail(id=101, rev=4, fields=fields, url="u/101")
    out = from_azure_work_items([wi])[0]
    assert out.model_dump() == {"id": 101, "rev": 4, "fields": fields, "url": "u/101"}
