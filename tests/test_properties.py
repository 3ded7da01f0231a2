from rentease.schemas.property import PropertyFilters


def test_list_filters_by_city_and_search(services, create_property):
    create_property(name="Kilimani Heights", city="Nairobi", address="Argwings Kodhek Road")
    create_property(name="Nyali Towers", city="Mombasa", address="Links Road")
    create_property(name="Riverside Court", city="Nairobi", address="Riverside Drive")

    by_city = services.properties.list(PropertyFilters(city="Nairobi"))
    assert {p.name for p in by_city.data} == {"Kilimani Heights", "Riverside Court"}

    by_address = services.properties.list(PropertyFilters(search="riverside DRIVE"))
    assert [p.name for p in by_address.data] == ["Riverside Court"]


def test_list_without_page_size_is_one_page(services, create_property):
    for index in range(3):
        create_property(name=f"Block {index}")

    page = services.properties.list()

    assert page.total == 3
    assert page.page == 1
    assert page.page_size == 3
    assert page.total_pages == 1


def test_list_paginates(services, create_property):
    for index in range(5):
        create_property(name=f"Block {index}")

    page = services.properties.list(page=2, page_size=2)

    assert [p.name for p in page.data] == ["Block 2", "Block 3"]
    assert page.total == 5
    assert page.total_pages == 3
    assert page.to_envelope()["pageSize"] == 2


def test_get_by_landlord(services, create_property):
    mine = create_property(landlord_id="user-peter")
    create_property(landlord_id="user-other")

    assert [p.id for p in services.properties.get_by_landlord("user-peter").data] == [mine.id]


def test_units_by_property(services, create_property, create_unit):
    first = create_property()
    second = create_property(name="Second")
    unit = create_unit(first.id)
    create_unit(second.id)

    assert [u.id for u in services.units.get_by_property(first.id).data] == [unit.id]


def test_available_units_join_parent_property(services, create_property, create_unit):
    prop = create_property()
    available = create_unit(prop.id, "A1")
    create_unit(prop.id, "A2", status="occupied")

    page = services.units.get_available()

    assert [u.id for u in page.data] == [available.id]
    assert page.data[0].property.id == prop.id
    assert page.to_envelope()["data"][0]["property"]["landlordId"] == prop.landlord_id


def test_available_units_with_missing_parent(services, create_unit):
    orphan = create_unit("prop-deleted")

    page = services.units.get_available()

    assert page.data[0].id == orphan.id
    assert page.data[0].property is None


def test_available_units_filters(services, create_property, create_unit):
    nairobi = create_property(city="Nairobi")
    mombasa = create_property(name="Nyali Towers", city="Mombasa")
    cheap = create_unit(nairobi.id, "A1", rentAmount=18000, bedrooms=0)
    mid = create_unit(nairobi.id, "A2", rentAmount=30000, bedrooms=1)
    create_unit(nairobi.id, "A3", rentAmount=60000, bedrooms=3)
    coast = create_unit(mombasa.id, "B1", rentAmount=25000, bedrooms=1)

    in_budget = services.units.get_available(PropertyFilters(min_rent=20000, max_rent=35000))
    assert {u.id for u in in_budget.data} == {mid.id, coast.id}

    one_bed_nairobi = services.units.get_available(PropertyFilters(bedrooms=1, city="Nairobi"))
    assert [u.id for u in one_bed_nairobi.data] == [mid.id]

    by_name = services.units.get_available(PropertyFilters(search="nyali"))
    assert [u.id for u in by_name.data] == [coast.id]

    assert services.units.get_available(PropertyFilters(max_rent=20000)).data[0].id == cheap.id
