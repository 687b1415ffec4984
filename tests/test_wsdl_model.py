import pytest

from wsdl_model import (Binding, BindingOperation, ComplexType, Definition, Element, Interface, Message, Operation,
                        SimpleType, TypeCatalog, UNBOUNDED)

TNS = "http://example.com/"


def test_element_flags():
    assert Element("A", min_occurs=0).is_optional
    assert not Element("A").is_optional
    assert Element("A", max_occurs=UNBOUNDED, is_array=True).is_array


def test_simple_type_is_enumeration():
    assert not SimpleType("S").is_enumeration
    assert SimpleType("S", enumeration_values=[""]).is_enumeration


def test_catalog_first_registration_wins():
    catalog = TypeCatalog()
    first = ComplexType("T", TNS)
    assert catalog.add_complex_type(first)
    assert not catalog.add_complex_type(ComplexType("T", "http://other/"))
    assert catalog.get_complex_type("T") is first
    assert catalog.has_complex_type("T")
    assert not catalog.has_complex_type("U")

    assert catalog.add_simple_type(SimpleType("S", TNS))
    assert not catalog.add_simple_type(SimpleType("S", TNS))


def test_catalog_lookups_respect_namespace():
    catalog = TypeCatalog()
    catalog.add_complex_type(ComplexType("T", TNS))
    catalog.add_simple_type(SimpleType("S", TNS))
    catalog.add_element(Element("E", TNS))
    assert catalog.get_complex_type("T", TNS) is not None
    assert catalog.get_complex_type("T", "http://other/") is None
    assert catalog.get_simple_type("S", "http://other/") is None
    assert catalog.get_element("E", TNS) is not None
    assert catalog.get_element("E", "http://other/") is None
    assert catalog.get_element("Missing") is None


@pytest.mark.parametrize("register", [
    lambda c: c.add_complex_type(ComplexType("T")),
    lambda c: c.add_simple_type(SimpleType("S")),
    lambda c: c.add_element(Element("E")),
    lambda c: c.add_imported_namespace("http://other/"),
    lambda c: c.add_schema(object()),
])
def test_frozen_catalog_rejects_every_registration(register):
    catalog = TypeCatalog()
    catalog.freeze()
    assert catalog.frozen
    with pytest.raises(RuntimeError):
        register(catalog)


def test_original_name_defaults_to_name():
    assert Operation("Add").original_name == "Add"
    assert Operation("Add_1", original_name="Add").original_name == "Add"
    assert BindingOperation("Add").original_name == "Add"


def test_definition_lookups():
    interface = Interface("Port", [Operation("Op")])
    binding = Binding("Bind", interface_name="Port", interface_namespace=TNS,
                      operations=[BindingOperation("Op", style="rpc")])
    definition = Definition(TNS, messages=[Message("M")], interfaces=[interface], bindings=[binding])
    assert definition.get_message("M", TNS).name == "M"
    assert definition.get_interface("Port") is interface
    assert definition.get_interface_for_binding(binding) is interface
    assert definition.get_binding("Bind", "http://other/") is None
    assert interface.get_operation("Missing") is None
    assert binding.style_for(binding.get_operation("Op")) == "rpc"


def test_dangling_binding_reference():
    binding = Binding("Bind", interface_name="Nowhere", interface_namespace=TNS)
    assert Definition(TNS, bindings=[binding]).get_interface_for_binding(binding) is None
