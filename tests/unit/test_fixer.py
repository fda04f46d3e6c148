"""
Unit tests for the fixer module — orchestration, adapters and the
end-to-end scenarios.

Covers:
  • offer_fixes: always locals + sample, lambda only for one typed parameter
  • CodeAction.apply for each strategy
  • failure modes: unresolved target type, cancellation, no site
  • fix_all across several initializers
  • StaticScopeProvider, SiteTable, TextDocumentEditor
"""

import pytest

from initgen.exceptions import DocumentEditError
from initgen.fixer.adapters import ScopeFrame, SiteTable, StaticScopeProvider, TextDocumentEditor
from initgen.fixer.models import TITLE_LAMBDA, TITLE_LOCALS, TITLE_SCAFFOLDING, FixHost
from initgen.fixer.orchestrator import FixOrchestrator
from initgen.model.models import MemberInfo, TypeInfo, TypeKind
from initgen.model.registry import TypeRegistry
from initgen.resolver.models import CancellationToken, LocalBinding, ResolutionStrategy
from initgen.syntax.models import InitializerSite, LambdaInfo, ObjectCreation, Parameter, Span
from initgen.syntax.render import FormatConfig


# ── Helpers ───────────────────────────────────────────────────────────────────

def make_site(document: str, creation_text: str, type_name: str,
              arguments=(), lambda_params=None, occurrence: int = 0) -> InitializerSite:
    """Locate `creation_text` in the document and describe it as a site."""
    start = -1
    for _ in range(occurrence + 1):
        start = document.index(creation_text, start + 1)
    brace = start + creation_text.rindex("{")
    return InitializerSite(
        creation=ObjectCreation(type_name, arguments=arguments),
        span=Span(start, start + len(creation_text)),
        initializer_span=Span(brace, start + len(creation_text)),
        enclosing_lambda=None if lambda_params is None else LambdaInfo(tuple(lambda_params)),
    )


def make_orchestrator(registry, sites, bindings=(), multiline=False) -> FixOrchestrator:
    table = SiteTable(sites, registry)
    host = FixHost(
        type_model=registry,
        scopes=StaticScopeProvider.flat(bindings),
        locator=table,
        symbols=table,
        editor=TextDocumentEditor(),
    )
    return FixOrchestrator(host, FormatConfig(multiline=multiline))


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def registry() -> TypeRegistry:
    return TypeRegistry([
        TypeInfo(name="Gender", kind=TypeKind.ENUM, enum_values=["Male", "Female"]),
        TypeInfo(name="Person", members=[
            MemberInfo(name="Name",   type="string"),
            MemberInfo(name="Age",    type="int"),
            MemberInfo(name="Gender", type="Gender"),
        ]),
        TypeInfo(name="PersonDto", members=[
            MemberInfo(name="Name", type="string"),
            MemberInfo(name="Age",  type="int"),
        ]),
        TypeInfo(name="Customer", members=[
            MemberInfo(name="FullName", type="string"),
            MemberInfo(name="Age",      type="int"),
        ]),
        TypeInfo(name="Box", members=[MemberInfo(name="Content", type="object")]),
    ])


DOC = "var p = new Person() { };"


# ── Scenarios ─────────────────────────────────────────────────────────────────

class TestScenarios:
    def test_locals(self, registry):
        site = make_site(DOC, "new Person() { }", "Person")
        orch = make_orchestrator(registry, [site], [LocalBinding("name", "string"), LocalBinding("age", "int")])
        result = orch.apply_fix(DOC, site, ResolutionStrategy.LOCALS)
        assert result == "var p = new Person() { Name = name, Age = age };"

    def test_sample_values(self, registry):
        site = make_site(DOC, "new Person() { }", "Person")
        orch = make_orchestrator(registry, [site])
        result = orch.apply_fix(DOC, site, ResolutionStrategy.SCAFFOLDING)
        assert result == 'var p = new Person() { Name = "lorem ipsum", Age = 32, Gender = Gender.Male };'

    def test_lambda_parameter(self, registry):
        doc = "var dtos = customers.Select(customer => new PersonDto() { });"
        site = make_site(doc, "new PersonDto() { }", "PersonDto",
                         lambda_params=[Parameter("customer", "Customer")])
        orch = make_orchestrator(registry, [site])
        result = orch.apply_fix(doc, site, ResolutionStrategy.LAMBDA_PARAMETER)
        assert result == "var dtos = customers.Select(customer => new PersonDto() { Age = customer.Age });"

    def test_object_member_omitted_by_sample(self, registry):
        doc = "var b = new Box() { };"
        site = make_site(doc, "new Box() { }", "Box")
        orch = make_orchestrator(registry, [site])
        assert orch.apply_fix(doc, site, ResolutionStrategy.SCAFFOLDING) == "var b = new Box() { };"

    def test_sample_values_idempotent_per_type(self, registry):
        site = make_site(DOC, "new Person() { }", "Person")
        orch = make_orchestrator(registry, [site])
        first = orch.render_fix(DOC, site, ResolutionStrategy.SCAFFOLDING)
        second = orch.render_fix(DOC, site, ResolutionStrategy.SCAFFOLDING)
        assert first == second


# ── Offering ──────────────────────────────────────────────────────────────────

class TestOfferFixes:
    def test_locals_and_sample_always_offered(self, registry):
        site = make_site(DOC, "new Person() { }", "Person")
        actions = make_orchestrator(registry, [site]).offer_fixes(DOC, site.initializer_span.start)
        assert [a.title for a in actions] == [TITLE_LOCALS, TITLE_SCAFFOLDING]

    def test_lambda_offered_for_single_parameter(self, registry):
        doc = "Map(c => new PersonDto() { });"
        site = make_site(doc, "new PersonDto() { }", "PersonDto", lambda_params=[Parameter("c", "Customer")])
        actions = make_orchestrator(registry, [site]).offer_fixes(doc, site.span.start)
        assert [a.title for a in actions] == [TITLE_LOCALS, TITLE_SCAFFOLDING, TITLE_LAMBDA]
        assert actions[2].equivalence_key == TITLE_LAMBDA

    @pytest.mark.parametrize("params", [
        [],
        [Parameter("a", "Customer"), Parameter("b", "Customer")],
        [Parameter("c", None)],
        [Parameter("c", "Unknown")],
    ])
    def test_lambda_withheld(self, registry, params):
        doc = "Map(c => new PersonDto() { });"
        site = make_site(doc, "new PersonDto() { }", "PersonDto", lambda_params=params)
        titles = [a.title for a in make_orchestrator(registry, [site]).offer_fixes(doc, site.span.start)]
        assert TITLE_LAMBDA not in titles

    def test_no_site_no_actions(self, registry):
        assert make_orchestrator(registry, []).offer_fixes(DOC, 3) == []

    def test_location_outside_site(self, registry):
        site = make_site(DOC, "new Person() { }", "Person")
        assert make_orchestrator(registry, [site]).offer_fixes(DOC, 2) == []

    def test_action_apply_runs_fix(self, registry):
        site = make_site(DOC, "new Person() { }", "Person")
        orch = make_orchestrator(registry, [site], [LocalBinding("age", "int")])
        action = orch.offer_fixes(DOC, site.span.start)[0]
        assert action.apply() == "var p = new Person() { Age = age };"


# ── Failure modes ─────────────────────────────────────────────────────────────

class TestFailures:
    def test_unresolved_target_type_returns_original(self, registry):
        doc = "var g = new Ghost() { };"
        site = make_site(doc, "new Ghost() { }", "Ghost")
        orch = make_orchestrator(registry, [site])
        assert orch.apply_fix(doc, site, ResolutionStrategy.SCAFFOLDING) == doc

    def test_cancelled_returns_original(self, registry):
        site = make_site(DOC, "new Person() { }", "Person")
        token = CancellationToken()
        token.cancel()
        orch = make_orchestrator(registry, [site])
        assert orch.apply_fix(DOC, site, ResolutionStrategy.SCAFFOLDING, token) == DOC

    def test_lambda_strategy_without_lambda_returns_original(self, registry):
        site = make_site(DOC, "new Person() { }", "Person")
        orch = make_orchestrator(registry, [site])
        assert orch.apply_fix(DOC, site, ResolutionStrategy.LAMBDA_PARAMETER) == DOC

    def test_stale_span_returns_original(self, registry):
        site = make_site(DOC, "new Person() { }", "Person")
        orch = make_orchestrator(registry, [site])
        short_doc = "var p;"
        assert orch.apply_fix(short_doc, site, ResolutionStrategy.SCAFFOLDING) == short_doc


# ── Layout ────────────────────────────────────────────────────────────────────

class TestMultilineLayout:
    def test_braces_follow_line_indent(self, registry):
        doc = "void M(string name)\n{\n    var p = new Person() { };\n}\n"
        site = make_site(doc, "new Person() { }", "Person")
        orch = make_orchestrator(registry, [site], [LocalBinding("name", "string")], multiline=True)
        assert orch.apply_fix(doc, site, ResolutionStrategy.LOCALS) == (
            "void M(string name)\n"
            "{\n"
            "    var p = new Person()\n"
            "    {\n"
            "        Name = name\n"
            "    };\n"
            "}\n"
        )

    def test_arguments_preserved(self, registry):
        doc = 'var p = new Person("x") { };'
        site = make_site(doc, 'new Person("x") { }', "Person", arguments=('"x"',))
        orch = make_orchestrator(registry, [site], [LocalBinding("age", "int")])
        assert orch.apply_fix(doc, site, ResolutionStrategy.LOCALS) == 'var p = new Person("x") { Age = age };'


# ── Fix all ───────────────────────────────────────────────────────────────────

class TestFixAll:
    DOC2 = "var a = new Person() { };\nvar b = new PersonDto { };\nvar c = new Ghost() { };\n"

    @pytest.fixture
    def sites(self):
        return [
            make_site(self.DOC2, "new Person() { }", "Person"),
            make_site(self.DOC2, "new PersonDto { }", "PersonDto", arguments=None),
            make_site(self.DOC2, "new Ghost() { }", "Ghost"),
        ]

    def test_rewrites_every_resolvable_site(self, registry, sites):
        orch = make_orchestrator(registry, sites, [LocalBinding("age", "int")])
        assert orch.fix_all(self.DOC2, ResolutionStrategy.LOCALS) == (
            "var a = new Person() { Age = age };\n"
            "var b = new PersonDto { Age = age };\n"
            "var c = new Ghost() { };\n"
        )

    def test_accepts_strategy_value(self, registry, sites):
        orch = make_orchestrator(registry, sites)
        result = orch.fix_all(self.DOC2, "scaffolding")
        assert 'new PersonDto { Name = "lorem ipsum", Age = 32 }' in result

    def test_lambda_without_lambdas_changes_nothing(self, registry, sites):
        orch = make_orchestrator(registry, sites)
        assert orch.fix_all(self.DOC2, ResolutionStrategy.LAMBDA_PARAMETER) == self.DOC2

    def test_cancelled_is_all_or_nothing(self, registry, sites):
        token = CancellationToken()
        token.cancel()
        orch = make_orchestrator(registry, sites)
        assert orch.fix_all(self.DOC2, ResolutionStrategy.SCAFFOLDING, token) == self.DOC2

    def test_initializer_nested_in_constructor_arguments(self, registry):
        doc = "var c = new Customer(new PersonDto() { }) { };"
        sites = [
            make_site(doc, "new Customer(new PersonDto() { }) { }", "Customer",
                      arguments=("new PersonDto() { }",)),
            make_site(doc, "new PersonDto() { }", "PersonDto"),
        ]
        orch = make_orchestrator(registry, sites)
        assert orch.fix_all(doc, ResolutionStrategy.SCAFFOLDING) == (
            'var c = new Customer(new PersonDto() { Name = "lorem ipsum", Age = 32 }) '
            '{ FullName = "lorem ipsum", Age = 32 };'
        )

    def test_nested_site_rewritten_when_outer_unresolvable(self, registry):
        doc = "var g = new Ghost(new PersonDto() { }) { };"
        sites = [
            make_site(doc, "new Ghost(new PersonDto() { }) { }", "Ghost",
                      arguments=("new PersonDto() { }",)),
            make_site(doc, "new PersonDto() { }", "PersonDto"),
        ]
        orch = make_orchestrator(registry, sites)
        assert orch.fix_all(doc, ResolutionStrategy.SCAFFOLDING) == (
            'var g = new Ghost(new PersonDto() { Name = "lorem ipsum", Age = 32 }) { };'
        )

    def test_identical_nested_arguments_each_rewritten(self, registry):
        doc = "var c = new Customer(new PersonDto() { }, new PersonDto() { }) { };"
        sites = [
            make_site(doc, "new Customer(new PersonDto() { }, new PersonDto() { }) { }", "Customer",
                      arguments=("new PersonDto() { }", "new PersonDto() { }")),
            make_site(doc, "new PersonDto() { }", "PersonDto"),
            make_site(doc, "new PersonDto() { }", "PersonDto", occurrence=1),
        ]
        orch = make_orchestrator(registry, sites, [LocalBinding("age", "int")])
        assert orch.fix_all(doc, ResolutionStrategy.LOCALS) == (
            "var c = new Customer(new PersonDto() { Age = age }, new PersonDto() { Age = age }) "
            "{ Age = age };"
        )


# ── Adapters ──────────────────────────────────────────────────────────────────

class TestStaticScopeProvider:
    def test_innermost_frame_first(self):
        provider = StaticScopeProvider([
            ScopeFrame([LocalBinding("outer", "int")], Span(0, 100)),
            ScopeFrame([LocalBinding("global", "int")]),
            ScopeFrame([LocalBinding("inner", "int")], Span(10, 20)),
        ])
        names = [b.name for b in provider.visible_bindings("", 15)]
        assert names == ["inner", "outer", "global"]

    def test_frames_not_covering_location_hidden(self):
        provider = StaticScopeProvider([ScopeFrame([LocalBinding("x", "int")], Span(10, 20))])
        assert provider.visible_bindings("", 25) == []

    def test_inner_declaration_shadows_outer(self):
        provider = StaticScopeProvider([
            ScopeFrame([LocalBinding("x", "long")], Span(0, 100)),
            ScopeFrame([LocalBinding("x", "int")], Span(10, 20)),
        ])
        assert provider.visible_bindings("", 15) == [LocalBinding("x", "int")]


class TestSiteTable:
    def test_innermost_site_wins(self, registry):
        doc = "var p = new Box() { Content = new Person() { } };"
        outer = InitializerSite(
            creation=ObjectCreation("Box"),
            span=Span(8, len(doc) - 1),
            initializer_span=Span(18, len(doc) - 1),
        )
        inner = make_site(doc, "new Person() { }", "Person")
        table = SiteTable([outer, inner], registry)
        assert table.find_empty_initializer(doc, inner.initializer_span.start) is inner

    def test_non_empty_initializer_is_not_reported(self, registry):
        site = InitializerSite(
            creation=ObjectCreation("Person").with_initializer([]),
            span=Span(0, 10),
            initializer_span=Span(5, 10),
        )
        filled = InitializerSite(
            creation=ObjectCreation("Person", initializer=(object(),)),
            span=Span(20, 30),
            initializer_span=Span(25, 30),
        )
        table = SiteTable([site, filled], registry)
        assert table.find_all_empty_initializers("") == [site]

    def test_unknown_creation_type(self, registry):
        site = make_site("new Ghost() { }", "new Ghost() { }", "Ghost")
        assert SiteTable([site], registry).type_of_creation(site) is None


class TestTextDocumentEditor:
    def test_replace(self):
        assert TextDocumentEditor().replace("abcdef", Span(1, 3), "XY") == "aXYdef"

    def test_replace_many_from_last_to_first(self):
        result = TextDocumentEditor().replace_many("0123456789", [(Span(1, 2), "aa"), (Span(5, 7), "")])
        assert result == "0aa234789"

    def test_overlap_rejected(self):
        with pytest.raises(DocumentEditError):
            TextDocumentEditor().replace_many("0123456789", [(Span(1, 4), "a"), (Span(3, 5), "b")])

    def test_out_of_range_rejected(self):
        with pytest.raises(DocumentEditError):
            TextDocumentEditor().replace("abc", Span(1, 9), "x")

    def test_invalid_span(self):
        with pytest.raises(ValueError):
            Span(5, 2)
