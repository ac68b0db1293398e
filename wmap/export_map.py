import numpy as np
from PIL import Image
from wmap.ff_world_map import WorldMapFile
from wmap.util import make_dir_for_file


def map_chip_grid(world_map: WorldMapFile):
    grid = np.array(world_map.map_chip_data, dtype=np.uint32)

    rows = world_map.vertical_width
    cols = world_map.horizontal_width
    if rows * cols == len(grid) and len(grid) > 0:
        grid = grid.reshape((rows, cols))

    grid.setflags(write=False)
    return grid


def map_chip_colors(grid):
    """Spread tile indices over RGB, 0 stays black"""
    v = grid.astype(np.uint64)
    rgb = np.stack([
        (v * 0x9E) & 0xFF,
        (v * 0x3B + (v >> 8)) & 0xFF,
        (v * 0xD5 + (v >> 16)) & 0xFF,
    ], axis=-1).astype(np.uint8)
    rgb[grid == 0] = 0
    return rgb


def export_map_png(world_map: WorldMapFile, filename, scale=1):
    grid = map_chip_grid(world_map)
    if grid.ndim != 2:
        raise ValueError('export_map_png: {} tiles do not fill a {}x{} map'.format(
            world_map.tiles_count, world_map.horizontal_width, world_map.vertical_width))

    img = Image.fromarray(map_chip_colors(grid))
    if scale > 1:
        img = img.resize((img.size[0] * scale, img.size[1] * scale), Image.NEAREST)

    make_dir_for_file(filename)
    img.save(filename)
    return img
