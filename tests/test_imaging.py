import numpy as np
import pytest
from PIL import Image

from alpharects.imaging.loading import ImageLoadError, load_mask
from alpharects.imaging.rendering import (
    OVERLAY_ALPHA,
    OverlaySaveError,
    render_overlay,
    save_overlay,
)
from alpharects.regions.detection import detect_regions
from alpharects.regions.mask import BinaryMask
from alpharects.regions.rect import Rect
from tests.helpers.mask_factory import blocks_array, opaque_pixels, write_rgba_png


class TestLoadMask:
    def test_loads_alpha_as_mask(self, tmp_path):
        grid = blocks_array(8, 6, [(2, 1, 4, 3)])
        path = write_rgba_png(tmp_path, grid)

        mask = load_mask(path)

        assert mask.dimensions() == (8, 6)
        assert np.array_equal(mask.pixels, grid)

    def test_low_alpha_counts_as_opaque(self, tmp_path):
        grid = blocks_array(4, 4, [(1, 1, 1, 1)])
        path = write_rgba_png(tmp_path, grid, alpha=1)
        assert load_mask(path).at(1, 1) is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageLoadError, match="does not exist"):
            load_mask(tmp_path / "missing.png")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "garbage.png"
        path.write_bytes(b"this is not an image")
        with pytest.raises(ImageLoadError, match="Could not parse image format"):
            load_mask(path)


class TestRenderOverlay:
    def test_inclusive_rectangles_get_overlay_alpha(self):
        overlay = render_overlay((6, 5), [Rect(1, 1, 2, 1)])
        pixels = np.array(overlay)

        assert overlay.mode == "RGBA"
        assert overlay.size == (6, 5)
        assert OVERLAY_ALPHA == 205

        expected = np.zeros((5, 6), dtype=np.uint8)
        expected[1:3, 1:4] = 205
        assert np.array_equal(pixels[..., 3], expected)
        # Colour channels stay untouched
        assert not pixels[..., :3].any()

    def test_rectangles_are_clipped_to_canvas(self):
        """The whole-image fallback rect reaches one past each edge."""
        overlay = render_overlay((4, 3), [Rect(0, 0, 4, 3)])
        assert (np.array(overlay)[..., 3] == 205).all()

    def test_base_image_colours_are_kept(self):
        base = Image.new("RGB", (4, 4), color=(10, 20, 30))
        overlay = render_overlay((4, 4), [Rect(0, 0, 1, 1)], alpha=99, base=base)
        pixels = np.array(overlay)

        assert tuple(pixels[0, 0]) == (10, 20, 30, 99)
        assert tuple(pixels[3, 3]) == (10, 20, 30, 255)

    def test_base_size_mismatch(self):
        with pytest.raises(ValueError):
            render_overlay((4, 4), [], base=Image.new("RGBA", (3, 3)))

    def test_save_and_reload(self, tmp_path):
        overlay = render_overlay((5, 5), [Rect(1, 1, 1, 1)])
        path = save_overlay(overlay, tmp_path / "out.png")

        with Image.open(path) as reloaded:
            assert reloaded.mode == "RGBA"
            assert np.array(reloaded)[1, 1, 3] == 205

    def test_save_failure(self, tmp_path):
        overlay = render_overlay((2, 2), [])
        with pytest.raises(OverlaySaveError):
            save_overlay(overlay, tmp_path / "no-such-dir" / "out.png")

    def test_redetecting_overlay_covers_original_shape(self):
        """Detection on a rendered overlay still covers every original opaque pixel."""
        original = BinaryMask(blocks_array(12, 12, [(3, 4, 6, 7)]))
        rects = detect_regions(original)

        overlay = render_overlay(original.dimensions(), rects)
        redetected = detect_regions(BinaryMask.from_image(overlay))

        assert redetected
        for x, y in opaque_pixels(original):
            assert any(r.contains(x, y) for r in redetected), f"Pixel ({x}, {y}) lost"
