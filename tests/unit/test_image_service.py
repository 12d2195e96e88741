"""Unit tests for services/image_service.py."""
import unittest

from models.errors import DimensionMismatch
from services.image_service import ImageService
from tests.base_test import BaseTestCase


class TestImageService(BaseTestCase):
    """Downscaling and size validation."""

    def setUp(self):
        super().setUp()
        self.service = ImageService(interpolation='area')

    def test_same_dimensions_returns_width_height(self):
        a = self.create_image(self.create_gray_pixels(7, 4, 0))
        b = self.create_image(self.create_gray_pixels(7, 4, 9))
        self.assertEqual(self.service.ensure_same_dimensions(a, b), (7, 4))

    def test_height_only_mismatch(self):
        a = self.create_image(self.create_gray_pixels(10, 10, 0))
        b = self.create_image(self.create_gray_pixels(10, 12, 0))
        with self.assertRaises(DimensionMismatch) as ctx:
            self.service.ensure_same_dimensions(a, b)
        self.assertEqual(ctx.exception.size_a, (10, 10))
        self.assertEqual(ctx.exception.size_b, (10, 12))

    def test_downscale_rejects_non_positive_scale(self):
        img = self.create_image(self.create_gray_pixels(4, 4, 0))
        with self.assertRaises(ValueError):
            self.service.downscale(img, 0)

    def test_downscale_keeps_small_images(self):
        img = self.create_image(self.create_gray_pixels(4, 4, 0))
        self.assertIs(self.service.downscale(img, 50), img)

    def test_is_grayscale(self):
        self.assertTrue(self.service.is_grayscale(self.create_image(self.create_gray_pixels(2, 2, 0))))
        self.assertFalse(self.service.is_grayscale(self.create_image([[[1, 2, 3]]])))

    def test_unknown_interpolation_is_rejected(self):
        with self.assertRaises(ValueError):
            ImageService(interpolation='sinc')

    def test_interpolation_name_is_case_insensitive(self):
        self.assertEqual(ImageService(interpolation='Nearest').interpolation, 'nearest')


if __name__ == '__main__':
    unittest.main()
