import json

from webcalc.session import CalcResult, Calculator


def test_equation_is_evaluated_and_rendered(calculator):
    result = calculator.calc("2 + 2")
    assert result.ok
    assert result.equation == "2.00000000 + 2.00000000"
    assert result.value == "4.00000000"


def test_assignment_reevaluates_current_equation(calculator):
    first = calculator.calc("a * a")
    assert first.state == "error"
    assert first.value == "Variable a does not have a defined value."

    for item, expected in [(-2, "4.00000000"), (3, "9.00000000"), (0, "0.00000000")]:
        result = calculator.calc(f"a = {item}")
        assert result.ok
        assert result.equation == "a * a"
        assert result.value == expected


def test_assignment_without_equation_succeeds_with_no_output(calculator):
    result = calculator.calc("x = 5")
    assert result == CalcResult(state="success", equation="", value="")
    assert calculator.variables == {"x": 5.0}


def test_new_equation_replaces_old_one(calculator):
    calculator.calc("x = 4")
    calculator.calc("x + 1")
    result = calculator.calc("x / 2")
    assert result.equation == "x / 2.00000000"
    assert result.value == "2.00000000"


def test_parse_error_is_reported(calculator):
    result = calculator.calc("a = b")
    assert result.state == "error"
    assert result.equation == ""
    assert "Equals can only take the form of variable = value." in result.value


def test_blank_input_is_reported(calculator):
    result = calculator.calc("   ")
    assert result.state == "error"
    assert result.value == "Neither equation nor variable set."


def test_failed_parse_keeps_previous_equation(calculator):
    calculator.calc("y = 2")
    calculator.calc("y * 3")
    calculator.calc("y = ")
    result = calculator.calc("y = 5")
    assert result.value == "15.00000000"


def test_negative_literals(calculator):
    result = calculator.calc("2 * -3")
    assert result.equation == "2.00000000 * -3.00000000"
    assert result.value == "-6.00000000"


def test_variables_property_is_a_copy(calculator):
    calculator.calc("z = 1")
    calculator.variables["z"] = 99.0
    assert calculator.variables == {"z": 1.0}


def test_assign_and_reset(calculator):
    calculator.assign({"k": 7})
    assert calculator.calc("k * 2").value == "14.00000000"
    calculator.reset()
    assert calculator.variables == {}
    assert calculator.equation == []


def test_result_serialises_to_page_contract(calculator):
    result = calculator.calc("1 / 4")
    assert json.loads(result.model_dump_json()) == {
        "state": "success",
        "equation": "1.00000000 / 4.00000000",
        "value": "0.25000000",
    }


def test_error_constructor():
    result = CalcResult.error("boom")
    assert not result.ok
    assert result.value == "boom"


def test_identifiers_with_combining_marks(calculator):
    result = calculator.calc("गति = 3")
    assert result.ok
    assert calculator.variables == {"गति": 3.0}
    result = calculator.calc("गति * 2")
    assert result.equation == "गति * 2.00000000"
    assert result.value == "6.00000000"

    calculator.calc("café = 1.5")
    result = calculator.calc("café + 1")
    assert result.value == "2.50000000"
