# tests/test_models.py
from __future__ import annotations

import pytest
from conftest import FEDERATED_JSON, FULL_XML_VALUES, UNKNOWN_JSON
from pydantic import ValidationError

from core.domain.models import NUMERIC_FIELDS, REALM_FIELDS, FailureEvent, RealmInfo
from core.domain.response_format import ResponseFormat


def test_nineteen_recognized_fields():
    assert len(REALM_FIELDS) == 19
    assert len(set(REALM_FIELDS)) == 19
    assert set(NUMERIC_FIELDS) <= set(REALM_FIELDS)


def test_mapping_round_trip_json():
    realm = RealmInfo.from_mapping(FEDERATED_JSON, source_format=ResponseFormat.JSON)

    assert realm.to_mapping() == FEDERATED_JSON
    assert realm.state == 3
    assert realm.cloud_instance_issuer_uri == "urn:federation:MicrosoftOnline"


def test_mapping_round_trip_xml_keeps_every_key():
    realm = RealmInfo.from_mapping(FULL_XML_VALUES, source_format=ResponseFormat.XML)

    assert realm.to_mapping() == FULL_XML_VALUES
    assert realm.mex_url == FULL_XML_VALUES["MEXURL"]


def test_absent_fields_are_not_invented():
    realm = RealmInfo.from_mapping(UNKNOWN_JSON, source_format=ResponseFormat.JSON)

    assert set(realm.to_mapping()) == {"State", "UserState", "Login", "NameSpaceType"}
    assert realm.auth_url is None
    assert realm.get("AuthURL") is None
    assert realm.get("AuthURL", "") == ""


def test_unknown_keys_are_preserved():
    realm = RealmInfo.from_mapping({"State": 4, "NewField": "x"}, source_format=ResponseFormat.JSON)

    assert realm.to_mapping() == {"State": 4, "NewField": "x"}
    assert realm.get("NewField") == "x"


def test_numeric_view_json_vs_xml():
    from_json = RealmInfo.from_mapping(FEDERATED_JSON, source_format=ResponseFormat.JSON)
    from_xml = RealmInfo.from_mapping(FULL_XML_VALUES, source_format=ResponseFormat.XML)

    assert from_json.numeric("UserState") == 2
    assert from_json.numeric("AuthNForwardType") == 1
    assert from_xml.numeric("UserState") == "2"
    assert from_xml.numeric("FederationGlobalVersion") == "-1"


def test_numeric_view_json_numeric_strings():
    realm = RealmInfo.from_mapping({"State": "3", "UserState": "n/a"}, source_format=ResponseFormat.JSON)

    assert realm.numeric("State") == 3
    assert realm.numeric("UserState") == "n/a"
    assert realm.numeric("FederationGlobalVersion") is None


def test_numeric_view_rejects_text_fields():
    realm = RealmInfo.from_mapping(UNKNOWN_JSON, source_format=ResponseFormat.JSON)

    with pytest.raises(KeyError):
        realm.numeric("Login")


@pytest.mark.parametrize(
    "namespace, federated",
    [("Federated", True), ("Managed", False), ("Unknown", False), ("SomethingElse", False)],
)
def test_is_federated(namespace, federated):
    realm = RealmInfo.from_mapping({"NameSpaceType": namespace}, source_format=ResponseFormat.XML)

    assert realm.is_federated is federated
    assert realm.name_space_type == namespace


def test_realm_info_is_frozen():
    realm = RealmInfo.from_mapping(UNKNOWN_JSON, source_format=ResponseFormat.JSON)

    with pytest.raises(ValidationError):
        realm.login = "x"  # type: ignore[misc]


def test_failure_event_requires_kind():
    with pytest.raises(ValidationError):
        FailureEvent(kind="")

    event = FailureEvent(kind="invalid_json", detail="boom")
    assert event.status_code is None
    assert event.model_dump(mode="json")["detail"] == "boom"


def test_response_format_helpers():
    assert ResponseFormat.JSON.query_flag == "json"
    assert ResponseFormat.XML.label() == "XML"
    assert ResponseFormat("json") is ResponseFormat.JSON


def test_json_values_of_any_type_pass_through():
    mapping = {"FederationGlobalVersion": 1.5, "Certificate": {"x": 1}, "MEXURL": ["a"], "State": None}

    realm = RealmInfo.from_mapping(mapping, source_format=ResponseFormat.JSON)

    assert realm.to_mapping() == mapping
    assert realm.numeric("FederationGlobalVersion") == 1.5
    assert realm.certificate == {"x": 1}


def test_numeric_properties_follow_source_format():
    from_json = RealmInfo.from_mapping({"State": "3", "UserState": 2}, source_format=ResponseFormat.JSON)
    from_xml = RealmInfo.from_mapping({"State": "3"}, source_format=ResponseFormat.XML)

    assert from_json.state == 3
    assert from_json.raw_state == "3"
    assert from_json.user_state == 2
    assert from_json.authn_forward_type is None
    assert from_xml.state == "3"
    assert from_xml.state == from_xml.numeric("State")


@pytest.mark.parametrize("value", ["--3", "3.0", "", " "])
def test_numeric_view_json_unparseable_strings_stay_text(value):
    realm = RealmInfo.from_mapping({"State": value}, source_format=ResponseFormat.JSON)

    assert realm.numeric("State") == value
    assert realm.state == value
