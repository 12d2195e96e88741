"""Unit tests for services/channel_service.py."""
import unittest

import numpy as np

from models.channel import Channel
from services.channel_service import ChannelService
from tests.base_test import BaseTestCase


class TestChannelService(BaseTestCase):
    """Row-major sample extraction per channel."""

    def setUp(self):
        super().setUp()
        self.service = ChannelService()
        rgb = np.zeros((2, 3, 3), dtype=np.uint8)
        rgb[..., 0] = [[1, 2, 3], [4, 5, 6]]
        rgb[..., 1] = [[11, 12, 13], [14, 15, 16]]
        rgb[..., 2] = [[21, 22, 23], [24, 25, 26]]
        self.rgb = self.create_image(rgb)
        self.gray = self.create_image([[7, 8, 9], [10, 11, 12]])

    def test_color_planes_are_row_major(self):
        np.testing.assert_array_equal(self.service.extract(self.rgb, Channel.RED), [1, 2, 3, 4, 5, 6])
        np.testing.assert_array_equal(self.service.extract(self.rgb, Channel.GREEN), [11, 12, 13, 14, 15, 16])
        np.testing.assert_array_equal(self.service.extract(self.rgb, Channel.BLUE), [21, 22, 23, 24, 25, 26])

    def test_sequence_length_is_width_times_height(self):
        samples = self.service.extract(self.rgb, Channel.RED)
        self.assertEqual(samples.shape, (6,))
        self.assertEqual(samples.dtype, np.uint8)

    def test_grayscale_answers_every_channel_with_gray(self):
        expected = [7, 8, 9, 10, 11, 12]
        for channel in Channel:
            np.testing.assert_array_equal(self.service.extract(self.gray, channel), expected)

    def test_gray_of_color_image_is_luma(self):
        img = self.create_image(np.full((2, 2, 3), 90, dtype=np.uint8))
        np.testing.assert_array_equal(self.service.extract(img, Channel.GRAY), [90, 90, 90, 90])

    def test_extract_does_not_modify_image(self):
        before = self.rgb.pixels.copy()
        self.service.extract(self.rgb, Channel.GREEN)
        np.testing.assert_array_equal(self.rgb.pixels, before)

    def test_empty_image_gives_empty_sequence(self):
        img = self.create_image(np.zeros((0, 5), dtype=np.uint8))
        self.assertEqual(self.service.extract(img, Channel.GRAY).size, 0)

    def test_gray_pair_uses_single_channel(self):
        self.assertEqual(self.service.channels_for(self.gray, self.gray), [Channel.GRAY])

    def test_mixed_pair_uses_color_channels(self):
        expected = [Channel.RED, Channel.GREEN, Channel.BLUE]
        self.assertEqual(self.service.channels_for(self.gray, self.rgb), expected)
        self.assertEqual(self.service.channels_for(self.rgb, self.gray), expected)
        self.assertEqual(self.service.channels_for(self.rgb, self.rgb), expected)


if __name__ == '__main__':
    unittest.main()
