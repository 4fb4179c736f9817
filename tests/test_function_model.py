from xlwgen.function_model import ArgumentModel, FunctionModel


def test_defaults_are_false_and_empty():
    model = FunctionModel("short", "EchoShort", "echoes a short")
    assert model.volatile is False
    assert model.time is False
    assert model.threadsafe is False
    assert model.help_id == ""
    assert model.asynchronous is False
    assert model.macro_sheet is False
    assert model.cluster_safe is False
    assert model.number_of_args == 0


def test_add_argument_keeps_order():
    model = FunctionModel("double", "Add", "adds")
    model.add_argument("double", "x", "first")
    model.add_argument("int", "y", "second")
    assert model.number_of_args == 2
    assert model.arguments == [
        ArgumentModel("double", "x", "first"),
        ArgumentModel("int", "y", "second"),
    ]


def test_instances_do_not_share_arguments():
    first = FunctionModel("double", "A", "a")
    second = FunctionModel("double", "B", "b")
    first.add_argument("double", "x", "d")
    assert second.arguments == []


def test_time_can_be_changed():
    model = FunctionModel("double", "A", "a", time=True)
    assert model.time is True
    model.time = False
    assert model.time is False