import pytest
from starlette import status

from course_rating_api.models import Criteria


url: str = '/criteria'


@pytest.mark.usefixtures('criteria')
def test_get_criteria(client):
    """Отключенные, исключенные и неактивные критерии в рейтинге не участвуют"""
    response = client.get(url)
    assert response.status_code == status.HTTP_200_OK
    json_response = response.json()
    assert json_response["total"] == 2
    assert {c["code"]: c["weight"] for c in json_response["criteria"]} == {"c1": 2, "c2": 6}
    standardized = {c["code"]: c["standardized_weight"] for c in json_response["criteria"]}
    assert standardized == pytest.approx({"c1": 0.25, "c2": 0.75})


def test_get_criteria_empty(client):
    response = client.get(url)
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.usefixtures('criteria')
def test_get_criteria_bad_weight(client, dbsession):
    criterion = dbsession.get(Criteria, 2)
    criterion.weight = 0
    dbsession.commit()
    response = client.get(url)
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["status"] == "Error"
