import io

import pytest
from lxml import etree

from wsdl_model import SoapVersion, UNBOUNDED
from wsdl_parser import WsdlParser, WsdlParserError, parse_wsdl
from wsdl_samples import TNS, XSD_NS, wsdl_document, schema

CALC_NS = "http://example.com/calculator/"

REQ_DOCUMENT = wsdl_document(
    schema('''
        <s:element name="Req">
          <s:complexType><s:sequence><s:element name="Id" type="s:int"/></s:sequence></s:complexType>
        </s:element>'''),
    '<message name="M"><part name="parameters" element="tns:Req"/></message>')


@pytest.fixture
def calculator(calculator_wsdl_path):
    return WsdlParser().parse_file(calculator_wsdl_path)


def test_request_element_end_to_end():
    definition = WsdlParser().parse_string(REQ_DOCUMENT)
    req = definition.types.get_element("Req", TNS)
    assert req.is_complex_type
    assert req.type_name == "ReqType"
    req_type = definition.types.get_complex_type("ReqType", TNS)
    assert [(e.name, e.type_name, e.type_namespace) for e in req_type.elements] == [("Id", "int", XSD_NS)]
    assert definition.get_message("M").parts[0].element_name == "Req"


def test_parse_string_accepts_bytes_and_text():
    assert WsdlParser().parse_string(REQ_DOCUMENT.encode("utf-8")).target_namespace == TNS
    assert WsdlParser().parse_string(REQ_DOCUMENT).target_namespace == TNS


def test_non_wsdl_root_is_rejected():
    with pytest.raises(WsdlParserError) as excinfo:
        WsdlParser().parse_string("<root/>")
    assert "Root element must be 'definitions'" in str(excinfo.value)


def test_definitions_in_foreign_namespace_is_rejected():
    with pytest.raises(WsdlParserError):
        WsdlParser().parse_string('<definitions xmlns="http://www.w3.org/ns/wsdl"/>')


def test_definitions_without_namespace_is_accepted(caplog):
    definition = WsdlParser().parse_string('<definitions targetNamespace="urn:bare"/>')
    assert definition.target_namespace == "urn:bare"
    assert "no namespace" in caplog.text


def test_malformed_xml_propagates_syntax_error():
    with pytest.raises(etree.XMLSyntaxError):
        WsdlParser().parse_string("<definitions")


def test_missing_file_raises_os_error(temp_dir):
    with pytest.raises(OSError):
        WsdlParser().parse_file(f"{temp_dir}/missing.wsdl")


def test_parse_wsdl_dispatch(calculator_wsdl_path):
    with open(calculator_wsdl_path, "rb") as f:
        data = f.read()
    from_path = parse_wsdl(calculator_wsdl_path, validate_schemas=False)
    from_bytes = parse_wsdl(data, validate_schemas=False)
    from_text = parse_wsdl(data.decode("utf-8"), validate_schemas=False)
    from_stream = parse_wsdl(io.BytesIO(data), validate_schemas=False)
    from_tree = parse_wsdl(etree.parse(calculator_wsdl_path), validate_schemas=False)
    for definition in (from_path, from_bytes, from_text, from_stream, from_tree):
        assert definition.target_namespace == CALC_NS
        assert [s.name for s in definition.services] == ["Calculator"]


def test_calculator_types(calculator):
    types = calculator.types
    assert list(types.complex_types) == [
        "Person", "Employee", "ArrayOfPerson", "ArrayOfString", "ArrayOfMixed", "Team",
        "AddRequestType", "AddResponseType", "GetTeamType", "FilterType", "CriteriaType",
        "GetTeamResponseType", "CalculatorFaultType", "AuthHeaderType",
    ]
    assert types.imported_namespaces == {"http://example.com/common/"}
    assert [e.name for e in types.elements] == [
        "AddRequest", "AddResponse", "GetTeam", "GetTeamResponse", "CalculatorFault", "AuthHeader"]
    assert types.get_simple_type("Operator").enumeration_values == ["Add", "Subtract", "Multiply", "Divide"]
    employee = types.get_complex_type("Employee")
    assert (employee.base_type_name, employee.base_type_namespace) == ("Person", CALC_NS)


def test_calculator_arrays(calculator):
    types = calculator.types
    people = types.get_complex_type("ArrayOfPerson")
    assert people.is_array and people.array_item_type == "Person"
    assert people.elements[0].max_occurs == UNBOUNDED
    assert people.elements[0].is_nillable
    strings = types.get_complex_type("ArrayOfString")
    assert (strings.array_item_type, strings.array_item_type_namespace) == ("string", XSD_NS)
    assert not types.get_complex_type("ArrayOfMixed").is_array
    team = types.get_complex_type("Team")
    assert team.is_array and team.array_item_type == "Person"
    assert len(team.elements) == 2
    assert team.get_element("Members").is_complex_type


def test_calculator_nested_inline_types(calculator):
    types = calculator.types
    assert types.get_complex_type("GetTeamType").get_element("Filter").type_name == "FilterType"
    assert types.get_complex_type("FilterType").get_element("Criteria").type_name == "CriteriaType"
    assert types.get_complex_type("GetTeamResponseType").get_element("GetTeamResult").is_complex_type


def test_calculator_operations(calculator):
    interface = calculator.get_interface("CalculatorSoap", CALC_NS)
    assert [op.name for op in interface.operations] == ["Add", "GetTeam", "Add_1"]
    add = interface.get_operation("Add")
    assert add.documentation == "Adds two numbers."
    assert add.faults[0].message_name == "CalculatorFaultMessage"
    overload = interface.get_operation("Add_1")
    assert overload.original_name == "Add"
    assert overload.input.message_name == "AddIntsSoapIn"
    assert [p.type_name for p in calculator.get_message("AddIntsSoapIn").parts] == ["int", "int"]


def test_calculator_bindings(calculator):
    soap11, soap12 = calculator.bindings
    assert soap11.soap_version == SoapVersion.SOAP_11
    assert soap12.soap_version == SoapVersion.SOAP_12
    assert calculator.get_interface_for_binding(soap12).name == "CalculatorSoap"

    add = soap11.get_operation("Add")
    assert add.input.headers[0].message_name == "AuthHeaderMessage"
    assert add.faults[0].name == "CalculatorFault"
    rpc = soap11.get_operation("Add_1")
    assert rpc.soap_action == "http://example.com/calculator/AddInts"
    assert soap11.style_for(rpc) == "rpc"
    assert rpc.input.use == "encoded"
    assert rpc.input.parts == ["a", "b"]
    assert rpc.input.encoding_style == "http://schemas.xmlsoap.org/soap/encoding/"
    assert soap11.style_for(soap11.get_operation("GetTeam")) == "document"

    # Bindings pair with port-type operations by their unique names
    interface = calculator.get_interface_for_binding(soap11)
    assert [op.name for op in soap11.operations] == [op.name for op in interface.operations]


def test_calculator_service(calculator):
    service = calculator.get_service("Calculator")
    assert service.documentation == "Simple calculator service."
    assert [(p.name, p.binding_name, p.location) for p in service.ports] == [
        ("CalculatorSoap", "CalculatorSoap", "http://example.com/calculator.asmx"),
        ("CalculatorSoap12", "CalculatorSoap12", "http://example.com/calculator.asmx"),
    ]


def test_skipping_schema_validation(calculator_wsdl_path):
    definition = WsdlParser(validate_schemas=False).parse_file(calculator_wsdl_path)
    assert definition.types.schemas == []


def test_calculator_schema_passes_strict_validation(calculator_wsdl_path, caplog):
    definition = WsdlParser().parse_file(calculator_wsdl_path)
    assert len(definition.types.schemas) == 1
    assert "failed strict validation" not in caplog.text


def test_overload_suffix_never_duplicates_declared_name():
    definition = WsdlParser().parse_string(wsdl_document(body='''
        <portType name="P">
          <operation name="Add"/>
          <operation name="Add_1"/>
          <operation name="Add"/>
        </portType>'''))
    names = [op.name for op in definition.get_interface("P").operations]
    assert len(set(names)) == len(names)
    assert names == ["Add", "Add_1", "Add_2"]
