"""Tests for root expansion and property check tasks."""

from fakes import DictLoader, collection, collection_def, prop_def, verdict
from propbridge.discovery.loader import PropertyLoader
from propbridge.engine.params import CheckParams
from propbridge.engine.props import Properties
from propbridge.engine.result import Outcome
from propbridge.errors import ClassificationError, PropertyNotFoundError
from propbridge.host.protocol import Fingerprint, Status, SuiteSelector, TaskDef, TestSelector
from propbridge.runner.counters import Counters
from propbridge.runner.executor import PropertyExecutor
from propbridge.runner.tasks import CheckPropTask, RootTask, TaskContext
from propbridge.runner.translator import EventTranslator


def make_context(subjects, engine, counters=None):
    loader = DictLoader(subjects)
    return TaskContext(
        property_loader=PropertyLoader(loader),
        executor=PropertyExecutor(engine, CheckParams(), loader),
        translator=EventTranslator(counters or Counters()),
    ), loader


class TestRootTask:

    def test_one_check_task_per_property(self, engine, handler, logger):
        suite = collection(a=Outcome.PASSED, b=Outcome.FAILED)
        context, _ = make_context({"tests.Suite": suite}, engine)

        children = RootTask(collection_def(), context).execute(handler, [logger])

        assert all(isinstance(c, CheckPropTask) for c in children)
        assert len(children) == 2
        assert {c.task_def.selectors for c in children} == {
            (TestSelector("a"),),
            (TestSelector("b"),),
        }
        assert handler.events == []
        assert engine.calls == []

    def test_duplicate_names_collapse(self, engine, handler, logger):
        suite = Properties("Dup")
        suite.property("same", verdict(Outcome.PASSED))
        suite.property("same", verdict(Outcome.FAILED))
        suite.property("other", verdict(Outcome.PASSED))
        context, _ = make_context({"tests.Suite": suite}, engine)

        children = RootTask(collection_def(), context).execute(handler, [logger])

        assert [c.names for c in children] == [["same"], ["other"]]

    def test_included_properties_expand_under_their_prefix(self, engine, handler, logger):
        strings = collection(reverse=Outcome.PASSED, concat=Outcome.FAILED)
        suite = collection(own=Outcome.PASSED)
        suite.include(strings, prefix="strings.")
        context, _ = make_context({"tests.Suite": suite}, engine)

        children = RootTask(collection_def(), context).execute(handler, [logger])

        assert [c.names for c in children] == [["own"], ["strings.reverse"], ["strings.concat"]]
        assert [name for name, _ in strings.properties] == ["reverse", "concat"]

    def test_single_property_expands_to_empty_name(self, engine, handler, logger):
        context, _ = make_context({"tests.single": verdict(Outcome.PASSED)}, engine)

        children = RootTask(prop_def(), context).execute(handler, [logger])

        assert [c.names for c in children] == [[""]]

    def test_children_keep_subject_identity(self, engine, handler, logger):
        context, _ = make_context({"tests.Suite": collection(a=Outcome.PASSED)}, engine)
        root_def = collection_def()

        child = RootTask(root_def, context).execute(handler, [logger])[0]

        assert child.task_def.fully_qualified_name == root_def.fully_qualified_name
        assert child.task_def.fingerprint == root_def.fingerprint

    def test_subject_loaded_lazily(self, engine):
        context, loader = make_context({"tests.Suite": collection(a=Outcome.PASSED)}, engine)

        RootTask(collection_def(), context)

        assert loader.resolved == []

    def test_unknown_fingerprint_reports_error_event(self, engine, handler, logger):
        counters = Counters()
        context, _ = make_context({"x": object()}, engine, counters)
        task_def = TaskDef("x", Fingerprint("unittest.TestCase", True))

        children = RootTask(task_def, context).execute(handler, [logger])

        assert children == []
        [event] = handler.events
        assert event.status is Status.ERROR
        assert event.selector == SuiteSelector()
        assert isinstance(event.throwable, ClassificationError)
        assert counters.error == 1 and counters.total == 1

    def test_session_continues_after_bad_subject(self, engine, handler, logger):
        context, _ = make_context({"tests.Suite": collection(a=Outcome.PASSED)}, engine)
        bad = RootTask(TaskDef("x", Fingerprint("nope", True)), context)
        good = RootTask(collection_def(), context)

        assert bad.execute(handler, [logger]) == []
        assert len(good.execute(handler, [logger])) == 1

    def test_execute_async_hands_result_to_continuation(self, engine, handler, logger):
        context, _ = make_context({"tests.Suite": collection(a=Outcome.PASSED)}, engine)
        received = []

        RootTask(collection_def(), context).execute_async(handler, [logger], received.append)

        assert len(received) == 1
        assert [c.names for c in received[0]] == [["a"]]


class TestCheckPropTask:

    def test_checks_selected_property_only(self, engine, handler, logger):
        suite = collection(a=Outcome.PASSED, b=Outcome.FAILED)
        context, _ = make_context({"tests.Suite": suite}, engine)
        task = CheckPropTask(collection_def(selectors=[TestSelector("b")]), context)

        assert task.execute(handler, [logger]) == []
        [event] = handler.events
        assert event.selector == TestSelector("b")
        assert event.status is Status.FAILURE
        assert len(engine.calls) == 1

    def test_multiple_selectors_in_order(self, engine, handler, logger):
        suite = collection(a=Outcome.PASSED, b=Outcome.EXHAUSTED, c=Outcome.PROVED)
        context, _ = make_context({"tests.Suite": suite}, engine)
        selectors = [TestSelector("c"), TestSelector("a")]

        CheckPropTask(collection_def(selectors=selectors), context).execute(handler, [logger])

        assert [e.selector_name for e in handler.events] == ["c", "a"]

    def test_duplicate_entries_are_all_checked(self, engine, handler, logger):
        suite = Properties("Dup")
        suite.property("same", verdict(Outcome.PASSED))
        suite.property("same", verdict(Outcome.FAILED))
        context, _ = make_context({"tests.Suite": suite}, engine)

        CheckPropTask(collection_def(selectors=[TestSelector("same")]), context).execute(handler, [logger])

        assert [e.status for e in handler.events] == [Status.SUCCESS, Status.FAILURE]

    def test_unmatched_name_reports_error(self, engine, handler, logger):
        counters = Counters()
        context, _ = make_context({"tests.Suite": collection(a=Outcome.PASSED)}, engine, counters)
        task = CheckPropTask(collection_def(selectors=[TestSelector("missing")]), context)

        assert task.execute(handler, [logger]) == []
        [event] = handler.events
        assert event.status is Status.ERROR
        assert event.selector == TestSelector("missing")
        assert isinstance(event.throwable, PropertyNotFoundError)
        assert engine.calls == []
        assert counters.snapshot().error == 1

    def test_suite_selectors_are_ignored(self, engine, handler, logger):
        context, _ = make_context({"tests.Suite": collection(a=Outcome.PASSED)}, engine)
        task = CheckPropTask(collection_def(selectors=[SuiteSelector()]), context)

        assert task.names == []
        assert task.execute(handler, [logger]) == []
        assert handler.events == []
