from travel_ai.models.itinerary_models import ItineraryDetails, ItineraryResponse
from travel_ai.models.itinerary_schema import (
    ITINERARY_SCHEMA,
    ITINERARY_SCHEMA_NAME,
    build_itinerary_schema_format,
)


def _objects(node):
    if isinstance(node, dict):
        if node.get("type") == "object":
            yield node
        for value in node.values():
            yield from _objects(value)
    elif isinstance(node, list):
        for item in node:
            yield from _objects(item)


def test_every_object_is_strict():
    objects = list(_objects(ITINERARY_SCHEMA))

    # root, Itinerary, Hotel, Activity, Restaurant
    assert len(objects) == 5
    for obj in objects:
        assert obj["additionalProperties"] is False
        assert sorted(obj["required"]) == sorted(obj["properties"])


def test_schema_names_match_response_model():
    props = ITINERARY_SCHEMA["properties"]
    assert set(props) == {f.alias for f in ItineraryResponse.model_fields.values()}

    itinerary_props = props["Itinerary"]["properties"]
    assert set(itinerary_props) == {f.alias for f in ItineraryDetails.model_fields.values()}
    assert set(itinerary_props["Hotels"]["items"]["properties"]) == {"Name", "Rating", "EstimatedCost"}
    assert set(itinerary_props["Activities"]["items"]["properties"]) == {"Name", "Time", "EstimatedCost"}
    assert set(itinerary_props["Restaurants"]["items"]["properties"]) == {"Name", "Cuisine", "EstimatedCost"}
    assert itinerary_props["TotalEstimatedCost"] == {"type": "number"}


def test_response_format_payload():
    fmt = build_itinerary_schema_format().to_response_format()

    assert fmt["type"] == "json_schema"
    assert fmt["json_schema"]["name"] == ITINERARY_SCHEMA_NAME == "itinerary_response"
    assert fmt["json_schema"]["strict"] is True
    assert fmt["json_schema"]["schema"] == ITINERARY_SCHEMA


def test_schema_copy_is_independent():
    fmt = build_itinerary_schema_format()
    fmt.schema_["properties"]["Destination"]["type"] = "integer"

    assert ITINERARY_SCHEMA["properties"]["Destination"]["type"] == "string"
