import pytest

from objmatch.core.matcher import InvalidArgument, match, match_single
from objmatch.core.models import CatalogObject, Criterion

EMPLOYEE = CatalogObject(type="Table", schema="dbo", name="Employee")
EMPLOYER = CatalogObject(type="Table", schema="dbo", name="Employer")
CUSTOMER = CatalogObject(type="Table", schema="dbo", name="Customer")
HR_EMPLOYEE = CatalogObject(type="Table", schema="HumanResources", name="Employee")
HR_DEPARTMENT = CatalogObject(type="Table", schema="HumanResources", name="Department")
V_EMPLOYEE = CatalogObject(type="View", schema="HumanResources", name="vEmployee")
V_EMP_DBO = CatalogObject(type="View", schema="dbo", name="EmpSummary")
PROC = CatalogObject(type="StoredProcedure", schema="dbo", name="uspGetEmployee")
SALES = CatalogObject(type="Table", schema="Sales", name="Customer")

CATALOG = [
    EMPLOYEE,
    EMPLOYER,
    CUSTOMER,
    HR_EMPLOYEE,
    HR_DEPARTMENT,
    V_EMPLOYEE,
    V_EMP_DBO,
    PROC,
    SALES,
]


def test_no_filters_returns_candidates_unchanged():
    candidates = [EMPLOYEE, CUSTOMER, EMPLOYEE]

    assert match(candidates) == candidates
    assert match(candidates, [], [], [], [], [], []) == candidates


def test_none_and_empty_filters_are_equivalent():
    with_none = match(CATALOG, None, [Criterion(schema="Sales")], None, None, None, None)
    with_empty = match(CATALOG, [], [Criterion(schema="Sales")], [], [], [], [])

    assert with_none == with_empty


def test_accepts_any_iterable_of_candidates():
    assert match(iter(CATALOG), [Criterion(name="Customer")]) == [CUSTOMER, SALES]


def test_include_by_schema_criterion():
    result = match(CATALOG, [Criterion(schema="DBO")])

    assert set(result) == {o for o in CATALOG if o.schema.lower() == "dbo"}


def test_include_by_name_prefix():
    candidates = [EMPLOYEE, EMPLOYER, CUSTOMER]

    assert match(candidates, [Criterion(name="Emp*")]) == [EMPLOYEE, EMPLOYER]


def test_include_criteria_combine_as_or():
    result = match(
        CATALOG,
        [Criterion(type="View", name="Emp*"), Criterion(type="Table", name="Emp*")],
    )

    assert set(result) == {EMPLOYEE, EMPLOYER, HR_EMPLOYEE, V_EMP_DBO}


def test_include_criteria_union_is_deduplicated():
    result = match(CATALOG, [Criterion(type="Table"), Criterion(schema="dbo")])

    assert len(result) == len(set(result))
    assert set(result) == {
        EMPLOYEE,
        EMPLOYER,
        CUSTOMER,
        HR_EMPLOYEE,
        HR_DEPARTMENT,
        V_EMP_DBO,
        PROC,
        SALES,
    }


def test_exclude_narrows_include():
    result = match(
        [EMPLOYEE, CUSTOMER, HR_EMPLOYEE, HR_DEPARTMENT, V_EMPLOYEE],
        [Criterion(type="Table")],
        [Criterion(schema="HumanResources")],
    )

    assert result == [EMPLOYEE, CUSTOMER]


def test_multiple_exclude_criteria_are_applied_in_turn():
    result = match(
        CATALOG,
        exclude_criteria=[Criterion(schema="HumanResources"), Criterion(type="Table", name="Emp*")],
    )

    assert set(result) == {CUSTOMER, V_EMP_DBO, PROC, SALES}


def test_type_criterion_does_not_honour_wildcards():
    assert match([EMPLOYEE], [Criterion(type="Tab*")]) == []
    assert match([CatalogObject(type="Tab*", name="x")], [Criterion(type="tab*")]) != []


def test_exclude_schemas_and_types():
    result = match(CATALOG, exclude_schemas=["Human*"], exclude_types=["table"])

    assert set(result) == {V_EMP_DBO, PROC}


def test_exclude_type_is_not_a_wildcard():
    assert match([EMPLOYEE, V_EMPLOYEE], exclude_types=["T*"]) == [EMPLOYEE, V_EMPLOYEE]


def test_include_schemas_union_then_types():
    result = match(CATALOG, include_schemas=["Sales", "human*"], include_types=["Table"])

    assert set(result) == {HR_EMPLOYEE, HR_DEPARTMENT, SALES}


def test_include_types_union():
    result = match(CATALOG, include_types=["View", "storedprocedure"])

    assert set(result) == {V_EMPLOYEE, V_EMP_DBO, PROC}


def test_schema_filters_apply_after_criteria():
    result = match(
        CATALOG,
        include_criteria=[Criterion(name="Emp*")],
        exclude_criteria=[Criterion(type="View")],
        include_schemas=["dbo"],
    )

    assert result == [EMPLOYEE, EMPLOYER]


def test_exclusion_wins_over_schema_include():
    result = match(CATALOG, include_schemas=["Sales"], exclude_types=["Table"])

    assert result == []


def test_objects_without_schema_only_match_blank_patterns():
    loose = CatalogObject(type="Table", schema=None, name="Orphan")

    assert match([loose], [Criterion(schema="dbo*")]) == []
    assert match([loose], [Criterion(schema="*")]) == [loose]
    assert match([loose], include_schemas=["dbo"]) == []


def test_match_is_idempotent():
    args = ([Criterion(type="Table")], [Criterion(schema="HumanResources")])

    first = match(CATALOG, *args)
    second = match(CATALOG, *args)

    assert first == second
    assert match(first, *args) == first


def test_candidates_are_returned_not_copied():
    result = match(CATALOG, [Criterion(name="Employee")])

    assert all(any(r is c for c in CATALOG) for r in result)


def test_none_candidates_raise_invalid_argument():
    with pytest.raises(InvalidArgument) as exc_info:
        match(None, [Criterion(type="Table")])

    assert exc_info.value.param_name == "candidates"
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("param", ["include_criteria", "exclude_criteria"])
def test_none_criterion_raises_invalid_argument(param):
    with pytest.raises(InvalidArgument, match=param):
        match(CATALOG, **{param: [Criterion(type="Table"), None]})


def test_match_single_wraps_scalars():
    result = match_single(
        Criterion(type="Table"),
        Criterion(schema="HumanResources"),
        None,
        None,
        None,
        None,
        CATALOG,
    )

    assert result == match(CATALOG, [Criterion(type="Table")], [Criterion(schema="HumanResources")])


def test_match_single_with_all_none_is_identity():
    assert match_single(candidates=CATALOG) == CATALOG


def test_match_single_schema_and_type():
    result = match_single(
        include_schema="dbo",
        exclude_type="StoredProcedure",
        candidates=CATALOG,
    )

    assert result == [EMPLOYEE, EMPLOYER, CUSTOMER, V_EMP_DBO]


def test_match_single_requires_candidates():
    with pytest.raises(InvalidArgument):
        match_single(Criterion(type="Table"))


@pytest.mark.parametrize("blank", ["", " ", None])
def test_blank_exclude_schema_removes_everything(blank):
    assert match(CATALOG, exclude_schemas=[blank]) == []


@pytest.mark.parametrize("blank", ["", " ", None])
def test_blank_include_schema_keeps_everything(blank):
    assert match(CATALOG, include_schemas=[blank]) == CATALOG


UNTYPED = CatalogObject(type=None, schema="dbo", name="Mystery")
BLANK_TYPED = CatalogObject(type=" ", schema="dbo", name="Spacer")


def test_none_type_string_only_matches_untyped_objects():
    candidates = [EMPLOYEE, UNTYPED, BLANK_TYPED]

    assert match(candidates, exclude_types=[None]) == [EMPLOYEE, BLANK_TYPED]
    assert match(candidates, include_types=[None]) == [UNTYPED]


def test_blank_type_string_only_matches_the_same_blank_type():
    candidates = [EMPLOYEE, UNTYPED, BLANK_TYPED]

    assert match(candidates, include_types=[" "]) == [BLANK_TYPED]
    assert match(candidates, include_types=[""]) == []
    assert match(candidates, exclude_types=[" "]) == [EMPLOYEE, UNTYPED]


@pytest.mark.parametrize("absent", [None, "", "  "])
def test_absent_criterion_type_does_not_restrict(absent):
    candidates = [EMPLOYEE, UNTYPED, BLANK_TYPED, V_EMP_DBO]

    assert match(candidates, [Criterion(type=absent)]) == candidates
    assert match(candidates, [Criterion(type=absent, schema="dbo")]) == candidates
    assert match(candidates, exclude_criteria=[Criterion(type=absent, name="Emp*")]) == [
        UNTYPED,
        BLANK_TYPED,
    ]
