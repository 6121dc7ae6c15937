from dataclasses import dataclass
from enum import Enum

from entityadapter import AdapterOptions, Update, create_entity_store


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Task:
    id: str
    description: str
    priority: int
    status: TaskStatus = TaskStatus.PENDING


def by_priority(a: Task, b: Task) -> int:
    """Highest priority first."""
    return b.priority - a.priority


def main() -> None:
    tasks = create_entity_store(
        AdapterOptions(sort=by_priority),
        lambda: {"filter": None},
        lambda set_state, get_state, store: {
            "show_only": lambda status: set_state({"filter": status}),
        },
    )
    tasks.subscribe(lambda state, previous: print(f"ids: {previous['ids']} -> {state['ids']}"))

    tasks.actions.add_many(
        [
            Task("collect", "Collect data", priority=2),
            Task("analyze", "Analyze data", priority=1),
            Task("report", "Generate report", priority=3),
        ]
    )

    # Duplicate add is a no-op: nothing is printed
    tasks.actions.add_one(Task("collect", "Collect data again", priority=9))

    # Raising a priority re-sorts the whole collection
    tasks.actions.update_one(Update(id="analyze", update={"priority": 5}))
    tasks.actions.upsert_one(Task("collect", "Collect data", 2, TaskStatus.COMPLETED))

    tasks.actions.show_only(TaskStatus.PENDING)
    status = tasks.get_state()["filter"]
    pending = [t for t in tasks.select(tasks.selectors.select_all) if t.status == status]
    print(f"Pending: {[t.description for t in pending]}")
    print(f"Total: {tasks.select(tasks.selectors.select_total)}")


if __name__ == "__main__":
    main()
