# tests/test_data_model.py

import pytest

from study_planner.data_model import (
    DeadlineTask,
    StudyTask,
    describe,
    task_from_dict,
)


def test_new_tasks_start_pending():
    assert StudyTask("Algebra", 45).is_complete is False
    assert DeadlineTask("Essay", "2026-11-01").is_complete is False


def test_mark_done_is_idempotent():
    task = StudyTask("Algebra", 45)
    task.mark_done()
    task.mark_done()
    assert task.is_complete is True


def test_describe_study_task():
    assert describe(StudyTask("Algebra", 45)) == "Study: Algebra (45 mins)"


def test_describe_deadline_task_keeps_date_text():
    task = DeadlineTask("Essay", "next friday")
    assert describe(task) == "Deadline: Essay (Due: next friday)"


def test_describe_rejects_other_objects():
    with pytest.raises(TypeError):
        describe("Algebra")


def test_to_dict_is_tagged_with_kind():
    assert StudyTask("Algebra", 45).to_dict() == {
        "kind": "study",
        "title": "Algebra",
        "is_complete": False,
        "minutes": 45,
    }
    done = DeadlineTask("Essay", "2026-11-01", is_complete=True)
    assert done.to_dict()["kind"] == "deadline"
    assert done.to_dict()["due_date"] == "2026-11-01"


def test_from_dict_restores_variant_and_flag():
    task = task_from_dict(
        {"kind": "deadline", "title": "Essay", "is_complete": True, "due_date": "soon"}
    )
    assert task == DeadlineTask("Essay", "soon", is_complete=True)


def test_from_dict_unknown_kind():
    with pytest.raises(ValueError):
        task_from_dict({"kind": "chore", "title": "Dishes", "is_complete": False})


def test_from_dict_missing_attribute():
    with pytest.raises(KeyError):
        task_from_dict({"kind": "study", "title": "Algebra", "is_complete": False})


@pytest.mark.parametrize(
    "record",
    [
        {"kind": "study", "title": "Algebra", "is_complete": "false", "minutes": 45},
        {"kind": "study", "title": "Algebra", "is_complete": False, "minutes": 45.9},
        {"kind": "study", "title": "Algebra", "is_complete": False, "minutes": True},
        {"kind": "study", "title": 7, "is_complete": False, "minutes": 45},
        {"kind": "deadline", "title": "Essay", "is_complete": 1, "due_date": "Fri"},
        {"kind": "deadline", "title": "Essay", "is_complete": False, "due_date": None},
        ["study", "Algebra"],
    ],
)
def test_from_dict_rejects_mistyped_records(record):
    with pytest.raises(ValueError):
        task_from_dict(record)


def test_title_and_attribute_are_fixed():
    study = StudyTask("Algebra", 45)
    deadline = DeadlineTask("Essay", "Fri")

    with pytest.raises(AttributeError):
        study.title = "Physics"
    with pytest.raises(AttributeError):
        study.minutes = 90
    with pytest.raises(AttributeError):
        deadline.due_date = "Mon"
    assert study == StudyTask("Algebra", 45)
    assert deadline == DeadlineTask("Essay", "Fri")
