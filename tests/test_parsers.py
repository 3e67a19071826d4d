"""Tests for the parser contract, the generated parser and the loader."""

import pytest

import descent_harness
from descent_harness import Event, Parser
from descent_harness.benchmark import check_contract, format_events
from descent_harness.exceptions import ParserLoadError
from descent_harness.parsers import BaseParser, load_parser


def collect(parser_cls, data: bytes) -> list[Event]:
    events: list[Event] = []
    parser_cls(data).parse(events.append)
    return events


class TestBaseParser:
    """Tests for the abstract contract."""

    def test_cannot_instantiate_abstract(self):
        """Test BaseParser requires iter_events."""
        with pytest.raises(TypeError):
            BaseParser(b"")

    def test_parse_drives_iter_events(self):
        """Test parse hands each yielded event to the callback in order."""
        class TwoEvents(BaseParser):
            def iter_events(self):
                yield Event(kind="A", start=0, end=0)
                yield Event(kind="B", start=0, end=0)

        kinds = []
        TwoEvents(b"").parse(lambda e: kinds.append(e.kind))
        assert kinds == ["A", "B"]

    def test_input_is_copied_to_bytes(self):
        """Test bytearray input is frozen into bytes."""
        buf = bytearray(b"abc")
        parser = Parser(buf)
        buf[0] = ord("z")
        assert parser.input == b"abc"

    def test_default_name(self):
        """Test name comes from parser_name."""
        assert Parser(b"").name == "lines"

    def test_repr(self):
        """Test repr includes the name and input size."""
        assert repr(Parser(b"abc")) == "Parser(name='lines', size=3)"


class TestGeneratedParser:
    """Tests for the shipped generated parser."""

    def test_harness_reexports_generated(self):
        """Test the stable name points at the generated module."""
        from descent_harness import generated
        assert descent_harness.Parser is generated.Parser

    def test_hello_world(self):
        """Test the minimal input produces one text event."""
        assert format_events(Parser, b"hello world") == ['Text "hello world" @ 0..11']

    def test_hello_world_newline(self):
        """Test the trailing newline stays in the content."""
        assert format_events(Parser, b"hello world\n") == ['Text "hello world\\n" @ 0..12']

    def test_lines(self):
        """Test one event per line with contiguous spans."""
        assert format_events(Parser, b"line one\nline two\n") == [
            'Text "line one\\n" @ 0..9',
            'Text "line two\\n" @ 9..18',
        ]

    def test_empty_input(self):
        """Test empty input yields no events."""
        assert collect(Parser, b"") == []

    def test_blank_lines(self):
        """Test bare newlines each produce an event."""
        assert format_events(Parser, b"\n\n") == [
            'Text "\\n" @ 0..1',
            'Text "\\n" @ 1..2',
        ]

    def test_full_coverage(self):
        """Test event contents concatenate back to the input."""
        data = b"a\nbb\n\nccc"
        assert b"".join(e.content for e in collect(Parser, data)) == data

    def test_non_text_input(self):
        """Test binary input renders with the byte fallback."""
        assert format_events(Parser, b"\xff\xfe\n") == ['Text b"\\xff\\xfe\\n" @ 0..3']

    def test_iter_events_is_lazy(self):
        """Test iter_events returns a generator, not a list."""
        events = Parser(b"a\nb\n").iter_events()
        assert next(events).start == 0
        assert next(events).start == 2


class TestElementParser:
    """Tests for the element-style fixture parser."""

    def test_element(self, element_parser_cls):
        """Test bracket and content events for one element."""
        assert format_events(element_parser_cls, b"|div Hello\n") == [
            "ElementStart @ 1..1",
            'Name "div" @ 1..4',
            'Text "Hello" @ 5..10',
            "ElementEnd @ 11..11",
        ]

    def test_element_without_text(self, element_parser_cls):
        """Test an element with only a name."""
        assert format_events(element_parser_cls, b"|br\n") == [
            "ElementStart @ 1..1",
            'Name "br" @ 1..3',
            "ElementEnd @ 4..4",
        ]


class TestContractProperties:
    """Contract properties checked against every parser."""

    @pytest.mark.parametrize("data", [
        b"",
        b"hello world",
        b"hello world\n",
        b"|div Hello\n|span Hi\nplain\n",
        b"\x00\xff\n|\xfe\n",
        b"\r\n\r\n",
        b"x" * 10000,
    ])
    def test_conforms(self, any_parser_cls, data):
        """Test determinism, ordering and single-line rendering."""
        assert check_contract(any_parser_cls, data) == []

    def test_deterministic_across_instances(self, any_parser_cls):
        """Test separate parser instances give identical output."""
        data = b"|div one\ntwo\n|p three"
        assert format_events(any_parser_cls, data) == format_events(any_parser_cls, data)

    def test_repeated_parse_same_instance(self, any_parser_cls):
        """Test calling parse twice on one instance repeats the sequence."""
        parser = any_parser_cls(b"|a b\nc\n")
        first, second = [], []
        parser.parse(lambda e: first.append(e.format_line()))
        parser.parse(lambda e: second.append(e.format_line()))
        assert first == second

    def test_check_contract_reports_disorder(self):
        """Test offsets running backwards are reported."""
        class Backwards(BaseParser):
            def iter_events(self):
                yield Event(kind="A", start=2, end=2)
                yield Event(kind="B", start=1, end=1)

        violations = check_contract(Backwards, b"abc")
        assert len(violations) == 1
        assert "before 2" in violations[0]

    def test_check_contract_reports_overrun(self):
        """Test spans past the input end are reported."""
        class Overrun(BaseParser):
            def iter_events(self):
                yield Event(kind="A", content=b"x", start=0, end=9)

        assert "past input end" in check_contract(Overrun, b"abc")[0]

    def test_check_contract_reports_nondeterminism(self):
        """Test differing output across passes is reported."""
        class Drifting(BaseParser):
            calls = 0

            def iter_events(self):
                Drifting.calls += 1
                for _ in range(Drifting.calls):
                    yield Event(kind="A", start=0, end=0)

        assert "non-deterministic" in check_contract(Drifting, b"")[0]


class TestLoader:
    """Tests for load_parser."""

    def test_load_default(self):
        """Test loading the generated parser by full target."""
        assert load_parser("descent_harness.generated:Parser") is Parser

    def test_class_defaults_to_parser(self):
        """Test the class name is optional."""
        assert load_parser("descent_harness.generated") is Parser

    def test_missing_module(self):
        """Test an unimportable module raises ParserLoadError."""
        with pytest.raises(ParserLoadError) as exc_info:
            load_parser("no_such_module_for_harness:Parser")
        assert exc_info.value.target == "no_such_module_for_harness:Parser"

    def test_missing_attribute(self):
        """Test a missing class raises ParserLoadError."""
        with pytest.raises(ParserLoadError, match="no attribute 'Nope'"):
            load_parser("descent_harness.generated:Nope")

    def test_not_a_parser(self):
        """Test a non-BaseParser attribute is rejected."""
        with pytest.raises(ParserLoadError, match="not a BaseParser subclass"):
            load_parser("descent_harness.generated:Event")

    def test_empty_target(self):
        """Test an empty target is rejected."""
        with pytest.raises(ParserLoadError):
            load_parser("")
