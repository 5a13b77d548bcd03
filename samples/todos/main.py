import logging
import threading

from pydantic import BaseModel

from wenetworking import HttpMethod, NetworkingError, RequestSpec, WENetworking

logger = logging.getLogger(__name__)

HOST = "https://jsonplaceholder.typicode.com"
ENDPOINT = "/todos"


class Todo(BaseModel):
    id: int
    title: str
    completed: bool


def main() -> None:
    networking = WENetworking(debug=True)
    done = threading.Event()

    def on_success(todos: list[Todo] | None) -> None:
        for todo in todos or []:
            print(f"[{'x' if todo.completed else ' '}] {todo.id}: {todo.title}")
        done.set()

    def on_failure(error: NetworkingError) -> None:
        logger.error(f"Request failed ({error.code}): {error.message}")
        done.set()

    spec = RequestSpec(
        host=HOST,
        endpoint=ENDPOINT,
        query_parameters={"_limit": "5"},
        method=HttpMethod.GET,
    )
    networking.execute(spec, list[Todo], on_success, on_failure)

    done.wait()
    networking.close()


if __name__ == "__main__":
    main()
