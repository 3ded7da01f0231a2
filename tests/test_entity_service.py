from rentease.services.result import ResultStatus


def test_create_assigns_prefixed_id_and_timestamps(services):
    result = services.properties.create({"name": "Westlands Park", "landlordId": "user-1"})

    assert result.success
    created = result.data
    assert created.id.startswith("prop-")
    assert created.created_at == created.updated_at
    assert services.properties.get_by_id(created.id).data == created


def test_ids_are_unique(services):
    ids = {services.messages.create({"senderId": "a", "receiverId": "b", "content": "hi"}).data.id for _ in range(50)}
    assert len(ids) == 50


def test_list_all_keeps_insertion_order(services, create_property):
    names = ["One", "Two", "Three"]
    for name in names:
        create_property(name=name)

    assert [p.name for p in services.properties.list_all().data] == names


def test_update_merges_patch_and_bumps_updated_at(services, create_property):
    prop = create_property(description="Old description")

    result = services.properties.update(prop.id, {"description": "Renovated in 2026", "totalUnits": 12})

    assert result.success
    updated = result.data
    assert updated.description == "Renovated in 2026"
    assert updated.total_units == 12
    assert updated.name == prop.name
    assert updated.created_at == prop.created_at
    assert updated.updated_at > prop.updated_at
    assert services.properties.get_by_id(prop.id).data == updated


def test_rapid_updates_keep_moving_forward(services, create_property):
    prop = create_property()
    previous = prop.updated_at
    for count in range(5):
        current = services.properties.update(prop.id, {"totalUnits": count}).data.updated_at
        assert current > previous
        previous = current


def test_update_ignores_immutable_and_unknown_fields(services, create_property):
    prop = create_property()

    result = services.properties.update(
        prop.id,
        {"id": "prop-hijack", "createdAt": "2000-01-01T00:00:00Z", "favouriteColour": "green", "city": "Mombasa"},
    )

    assert result.success
    assert result.data.id == prop.id
    assert result.data.created_at == prop.created_at
    assert result.data.city == "Mombasa"
    assert not hasattr(result.data, "favouriteColour")


def test_update_accepts_snake_case_keys(services, create_unit, create_property):
    unit = create_unit(create_property().id)
    result = services.units.update(unit.id, {"rent_amount": 32000})
    assert result.data.rent_amount == 32000


def test_update_rejects_invalid_enum(services, create_property, create_unit):
    unit = create_unit(create_property().id)

    result = services.units.update(unit.id, {"status": "demolished"})

    assert result.status == ResultStatus.INVALID
    assert "status" in result.message
    assert services.units.get_by_id(unit.id).data.status == "available"


def test_explicit_none_clears_optional_field(services, create_user):
    user = create_user(avatarUrl="https://cdn.rentease.co.ke/a.png")
    result = services.users.update(user.id, {"avatarUrl": None})
    assert result.data.avatar_url is None


def test_update_unknown_id_is_not_found(services):
    result = services.users.update("user-missing", {"phone": "+254700000000"})
    assert result.status == ResultStatus.NOT_FOUND
    assert result.message == "User not found"


def test_delete_removes_record_and_is_idempotent(services, create_property):
    keep = create_property(name="Keep")
    drop = create_property(name="Drop")

    assert services.properties.delete(drop.id).success
    assert services.properties.get_by_id(drop.id).status == ResultStatus.NOT_FOUND

    assert services.properties.delete("prop-missing").success
    assert [p.id for p in services.properties.list_all().data] == [keep.id]


def test_create_rejects_missing_required_field(services):
    result = services.properties.create({"name": "No landlord"})
    assert result.status == ResultStatus.INVALID


def test_list_by_unknown_value_is_empty(services, create_property):
    create_property(landlord_id="user-1")
    assert services.properties.get_by_landlord("user-nobody").data == []


def test_envelope_uses_camel_case(services, create_property):
    envelope = services.properties.get_by_id(create_property().id).to_envelope()
    assert envelope["success"] is True
    assert "landlordId" in envelope["data"]
    assert "createdAt" in envelope["data"]


def test_reads_tolerate_missing_optional_keys(store, services):
    store.set("users", [{"id": "user-legacy", "email": "old@rentease.co.ke"}])

    user = services.users.get_by_id("user-legacy").data

    assert user.role == "tenant"
    assert user.status == "active"
    assert user.avatar_url is None
