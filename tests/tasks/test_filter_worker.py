import math

import pytest
from PySide6.QtCore import QThreadPool

from pixelfx.tasks import FilterJobWorker, handle_message, process_image


def test_process_image_returns_filtered_copy():
    source = bytes([10, 20, 30, 255])
    result = process_image(source, "invert", 1.0, 3)

    assert result.success is True
    assert result.job == 3
    assert result.type == "invert"
    assert result.buffer == bytes([245, 235, 225, 255])
    assert result.error is None
    assert source == bytes([10, 20, 30, 255])


def test_process_image_accepts_parameter_sequences():
    result = process_image(bytearray(4), "tint", [1, 2, 3], 1)
    assert result.buffer == bytes([1, 2, 3, 0])


def test_process_image_reports_unknown_filter():
    result = process_image(bytes(4), "posterize", 0.5, 9)

    assert result.success is False
    assert result.buffer is None
    assert "posterize" in result.error


def test_process_image_reports_bad_length():
    result = process_image(bytes(6), "fade", 0.5, 2)

    assert result.success is False
    assert "multiple of 4" in result.error


def test_handle_message_echoes_slider_state():
    reply = handle_message(
        {
            "type": "brightness",
            "buffer": bytes([200, 10, 0, 255]),
            "value": 50,
            "job": 11,
            "prevAmount": 0,
            "currentAmount": 50,
        }
    )

    assert reply == {
        "success": True,
        "job": 11,
        "type": "brightness",
        "buffer": bytes([250, 60, 50, 255]),
        "error": None,
        "prevAmount": 0,
        "currentAmount": 50,
    }


def test_handle_message_requires_buffer():
    reply = handle_message({"type": "sepia", "value": 1.0, "job": 4, "prevAmount": 0.2})

    assert reply["success"] is False
    assert reply["error"] == "No image data provided"
    assert reply["prevAmount"] == 0.2
    assert reply["currentAmount"] is None


def test_process_image_treats_bytes_value_as_one_parameter():
    result = process_image(bytes(4), "invert", b"\x01\x02", 1)

    assert result.success is False
    assert "Invalid parameter for invert" in result.error


def test_handle_message_reports_unexpected_errors():
    reply = handle_message(
        {"type": "invert", "buffer": "abcd", "value": 1.0, "job": 6, "prevAmount": 0.1, "currentAmount": 0.9}
    )

    assert reply["success"] is False
    assert reply["buffer"] is None
    assert reply["error"]
    assert reply["job"] == 6
    assert reply["prevAmount"] == 0.1
    assert reply["currentAmount"] == 0.9


def test_handle_message_init_compiles_kernels():
    reply = handle_message({"type": "init", "job": 0})
    assert reply == {"type": "init", "success": True, "job": 0, "error": None}


def test_worker_run_emits_reply():
    worker = FilterJobWorker({"type": "solarize", "buffer": bytes([200, 100, 0, 1]), "value": 0.5, "job": 5})
    replies = []
    worker.signals.finished.connect(replies.append)

    worker.run()

    assert worker.job == 5
    assert len(replies) == 1
    assert replies[0]["buffer"] == bytes([55, 100, 0, 1])


def test_worker_on_thread_pool(qtbot):
    worker = FilterJobWorker(
        {"type": "temperature", "buffer": bytes([100, 100, 100, 255]), "value": 1.0, "job": 8},
        backend="numpy",
    )

    with qtbot.waitSignal(worker.signals.finished, timeout=10000) as blocker:
        QThreadPool.globalInstance().start(worker)

    reply = blocker.args[0]
    assert reply["success"] is True
    assert reply["job"] == 8
    assert reply["buffer"] == bytes([120, 100, 80, 255])


@pytest.mark.parametrize("backend", ["jit", "numpy", "pillow", "python"])
def test_process_image_honours_backend(backend):
    result = process_image(bytes([128, 64, 200, 255]), "contrast", 2.0, 1, backend=backend)
    assert result.buffer == bytes([128, 0, 255, 255])


def test_worker_run_emits_reply_for_infinite_delta():
    worker = FilterJobWorker({"type": "brightness", "buffer": bytes(4), "value": math.inf, "job": 12})
    replies = []
    worker.signals.finished.connect(replies.append)

    worker.run()

    assert len(replies) == 1
    assert replies[0]["success"] is True
    assert replies[0]["buffer"] == bytes([255, 255, 255, 0])


def test_worker_run_emits_reply_on_unexpected_error():
    worker = FilterJobWorker({"type": "fade", "buffer": object(), "value": 0.5, "job": 13})
    replies = []
    worker.signals.finished.connect(replies.append)

    worker.run()

    assert len(replies) == 1
    assert replies[0]["success"] is False
    assert replies[0]["job"] == 13
