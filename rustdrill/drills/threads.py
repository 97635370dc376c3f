"""Worked answers for the thread drills: joining, shared state and channels."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass, field

_CLOSED = object()


def run_workers(count: int = 10, delay: float = 0.25) -> int:
    """Start count sleeping threads, wait for all of them and return how many finished."""

    def work(i: int) -> None:
        time.sleep(delay)
        print(f"thread {i} is complete")

    handles = [threading.Thread(target=work, args=(i,)) for i in range(count)]
    for handle in handles:
        handle.start()
    completed_threads = 0
    for handle in handles:
        handle.join()
        completed_threads += 1
    if completed_threads != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed_threads


@dataclass
class JobStatus:
    """A counter of finished jobs, guarded by a lock."""

    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


def complete_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Run count jobs that each update the shared status; return it once all are joined."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=job) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with status.lock:
            completed = status.jobs_completed
        print(f"jobs completed {completed}")
    return status


@dataclass
class Queue:
    """Numbers to send, split into two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(queue: Queue, channel: queue.Queue, delay: float = 1.0) -> list[threading.Thread]:
    """Send both halves on the channel from two threads.

    Each sender puts a closing marker after its values; the started threads are returned.
    """

    def send(values: list[int]) -> None:
        try:
            for val in values:
                print(f"sending {val}")
                channel.put(val)
                time.sleep(delay)
        finally:
            channel.put(_CLOSED)

    senders = [
        threading.Thread(target=send, args=(queue.first_half,), daemon=True),
        threading.Thread(target=send, args=(queue.second_half,), daemon=True),
    ]
    for sender in senders:
        sender.start()
    return senders


def receive_all(queue: Queue, delay: float = 1.0) -> list[int]:
    """Receive every number sent from the queue; raise if the count differs from its length."""
    channel: queue.Queue = _new_channel()
    senders = send_tx(queue, channel, delay)
    open_senders = len(senders)
    received: list[int] = []
    while open_senders:
        item = channel.get()
        if item is _CLOSED:
            open_senders -= 1
            continue
        print(f"Got: {item}")
        received.append(item)
    for sender in senders:
        sender.join()
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers but the queue has length {queue.length}"
        )
    return received


def _new_channel():
    import queue as _queue_module

    return _queue_module.Queue()