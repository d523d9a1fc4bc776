import numpy as np
import pytest

from spinningdonut.model.framebuffer import FrameBuffer
from spinningdonut.model.sampler import SampleBatch


def make_batch(samples):
    xs, ys, intensities = zip(*samples)
    return SampleBatch(
        xs=np.array(xs, dtype=np.int64),
        ys=np.array(ys, dtype=np.int64),
        intensities=np.array(intensities, dtype=np.uint8),
    )


def test_new_buffer_is_background():
    buffer = FrameBuffer(4, 3, background=(10, 20, 30))
    pixels = buffer.view()
    assert pixels.shape == (3, 4, 3)
    assert (pixels == np.array([10, 20, 30], dtype=np.uint8)).all()


def test_rejects_bad_size():
    with pytest.raises(ValueError):
        FrameBuffer(0, 10)


def test_write_is_grayscale():
    buffer = FrameBuffer(4, 3)
    buffer.write(make_batch([(2, 1, 77)]))
    assert buffer.view()[1, 2].tolist() == [77, 77, 77]
    assert buffer.view()[0, 0].tolist() == [0, 0, 0]


def test_last_writer_wins():
    buffer = FrameBuffer(4, 3)
    written = buffer.write(make_batch([(1, 0, 10), (3, 2, 5), (1, 0, 200), (1, 0, 20)]))
    assert written == 2
    assert buffer.view()[0, 1].tolist() == [20, 20, 20]
    assert buffer.view()[2, 3].tolist() == [5, 5, 5]


def test_last_writer_wins_even_when_darker():
    buffer = FrameBuffer(2, 2)
    buffer.write(make_batch([(0, 0, 255), (0, 0, 0)]))
    assert buffer.view()[0, 0].tolist() == [0, 0, 0]


def test_out_of_bounds_samples_are_dropped():
    buffer = FrameBuffer(4, 3)
    written = buffer.write(make_batch([(-1, 0, 50), (4, 0, 50), (0, 3, 50), (0, -2, 50), (0, 0, 9)]))
    assert written == 1
    pixels = buffer.view()
    assert pixels[0, 0].tolist() == [9, 9, 9]
    assert int(pixels.sum()) == 27


def test_clear_restores_background():
    buffer = FrameBuffer(4, 3)
    buffer.write(make_batch([(0, 0, 99), (3, 2, 99)]))
    buffer.clear()
    assert not buffer.view().any()


def test_view_is_read_only():
    buffer = FrameBuffer(4, 3)
    view = buffer.view()
    with pytest.raises(ValueError):
        view[0, 0] = 255


def test_view_tracks_later_writes():
    buffer = FrameBuffer(4, 3)
    view = buffer.view()
    snapshot = view.copy()
    buffer.write(make_batch([(0, 0, 40)]))
    assert view[0, 0, 0] == 40
    assert snapshot[0, 0, 0] == 0


def test_empty_write():
    buffer = FrameBuffer(4, 3)
    assert buffer.write(SampleBatch.empty()) == 0
