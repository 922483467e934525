"""
Tests for department, position and location lookup endpoints
"""
from datetime import datetime

import pytest
from fastapi import status
from sqlalchemy import text

from masterdata.models.department import Department, Position
from masterdata.models.location import Geography, Province, District, SubDistrict


@pytest.fixture
def org_chart(db):
    engineering = Department(department_id=2, department_name="Engineering")
    finance = Department(department_id=1, department_name="Finance", updated_date=datetime(2024, 3, 1, 9, 30))
    db.add_all([engineering, finance])
    db.flush()
    db.add_all([
        Position(position_id=1, department_id=2, position_name="QA Engineer", acronym="QA"),
        Position(position_id=2, department_id=2, position_name="Backend Developer", acronym="BE"),
        Position(position_id=3, department_id=1, position_name="Accountant", acronym=None),
    ])
    db.commit()


@pytest.fixture
def thailand(db):
    db.add_all([
        Geography(geography_id=2, name="Central"),
        Geography(geography_id=1, name="North"),
    ])
    db.flush()
    db.add_all([
        Province(province_id=10, province_name_th="เชียงใหม่", province_name_en="Chiang Mai", geography_id=1),
        Province(province_id=11, province_name_th="ลำพูน", province_name_en="Lamphun", geography_id=1),
        Province(province_id=20, province_name_th="กรุงเทพมหานคร", province_name_en="Bangkok", geography_id=2),
        Province(
            province_id=99, province_name_th="เก่า", province_name_en="Abandoned", geography_id=1,
            deleted_at=datetime(2023, 12, 31, 0, 0),
        ),
    ])
    db.flush()
    db.add_all([
        District(district_id=100, name_th="เมืองเชียงใหม่", name_en="Mueang Chiang Mai", province_id=10),
        District(district_id=101, name_th="หางดง", name_en="Hang Dong", province_id=10),
        District(
            district_id=102, name_th="เก่า", name_en="Old District", province_id=10,
            deleted_at=datetime(2022, 1, 1, 0, 0),
        ),
    ])
    db.flush()
    db.add_all([
        SubDistrict(
            sub_district_id=1000, zip_code=50200, name_th="ศรีภูมิ", name_en="Si Phum",
            district_id=100, lat="18.7953", long="98.9870",
        ),
        SubDistrict(sub_district_id=1001, zip_code=None, name_th="ช้างม่อย", name_en="Chang Moi", district_id=100),
        SubDistrict(
            sub_district_id=1002, zip_code=50230, name_th="หางดง", name_en="Hang Dong", district_id=101,
            deleted_at=datetime(2022, 1, 1, 0, 0),
        ),
    ])
    db.commit()


def test_empty_lookups_return_empty_arrays(client, db):
    for path in ("departments", "positions", "geographies", "provinces", "districts", "subdistricts"):
        response = client.get(f"/api/{path}")
        assert response.status_code == status.HTTP_200_OK, path
        assert response.json() == [], path


def test_departments_ordered_by_id(client, org_chart):
    body = client.get("/api/departments").json()
    assert [d["department_id"] for d in body] == [1, 2]
    finance = body[0]
    assert finance["department_name"] == "Finance"
    assert finance["updated_date"] == "2024-03-01 09:30:00"
    assert "updated_date" not in body[1]
    assert len(finance["created_date"]) == len("2024-03-01 09:30:00")


def test_positions_ordered_by_name(client, org_chart):
    body = client.get("/api/positions").json()
    assert [p["position_name"] for p in body] == ["Accountant", "Backend Developer", "QA Engineer"]
    assert body[0]["acronym"] == ""


def test_positions_filtered_by_department(client, org_chart):
    body = client.get("/api/positions", params={"department_id": 2}).json()
    assert [p["position_id"] for p in body] == [2, 1]
    assert all(p["department_id"] == 2 for p in body)


def test_positions_blank_filter_means_all(client, org_chart):
    body = client.get("/api/positions", params={"department_id": ""}).json()
    assert len(body) == 3


@pytest.mark.parametrize("path,param", [
    ("positions", "department_id"),
    ("provinces", "geography_id"),
    ("districts", "province_id"),
    ("subdistricts", "district_id"),
])
def test_non_integer_filter_is_400(client, db, path, param):
    response = client.get(f"/api/{path}", params={param: "abc"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.text == f"Invalid {param} parameter"


def test_geographies_ordered_by_id(client, thailand):
    assert client.get("/api/geographies").json() == [
        {"geography_id": 1, "name": "North"},
        {"geography_id": 2, "name": "Central"},
    ]


def test_provinces_exclude_soft_deleted(client, thailand):
    body = client.get("/api/provinces").json()
    assert [p["province_name_en"] for p in body] == ["Bangkok", "Chiang Mai", "Lamphun"]
    assert all("deleted_at" not in p for p in body)


def test_provinces_by_geography(client, thailand):
    body = client.get("/api/provinces", params={"geography_id": 1}).json()
    assert [p["province_id"] for p in body] == [10, 11]


def test_districts_by_province(client, thailand):
    body = client.get("/api/districts", params={"province_id": 10}).json()
    assert [d["name_en"] for d in body] == ["Hang Dong", "Mueang Chiang Mai"]


def test_subdistricts_null_policy(client, thailand):
    body = client.get("/api/subdistricts", params={"district_id": 100}).json()
    assert [s["name_en"] for s in body] == ["Chang Moi", "Si Phum"]
    chang_moi, si_phum = body
    assert chang_moi["zip_code"] == 0
    assert "lat" not in chang_moi and "long" not in chang_moi
    assert si_phum["zip_code"] == 50200
    assert si_phum["lat"] == "18.7953"
    assert si_phum["long"] == "98.9870"


def test_soft_deleted_subdistricts_hidden(client, thailand):
    assert client.get("/api/subdistricts", params={"district_id": 101}).json() == []


def test_undecodable_row_is_500(client, db, thailand):
    # INTEGER affinity keeps a non-numeric string as TEXT
    db.execute(text("UPDATE m_sub_district SET zip_code = 'unknown' WHERE sub_district_id = 1000"))
    db.commit()
    response = client.get("/api/subdistricts", params={"district_id": 100})
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith("Error decoding record")
    assert "zip_code" in response.text
