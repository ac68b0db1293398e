from typing import NamedTuple, Tuple, Optional
from wmap.file import ArchiveFile
from wmap.errors import EWmapCountLimit


class StdString(NamedTuple):
    length: int
    data: bytes


class WorldChip(NamedTuple):
    header: int
    tile_index: int
    locked: int
    graphic: int
    strings_count: int  # 2

    name: StdString
    unused_string: StdString


class WorldEventPage(NamedTuple):
    start: int
    event_type: int
    graphic: int

    world_number: int
    pass_without_clear: int
    play_after_clear: int
    on_game_clear: int

    appearance_condition_world: int
    appearance_condition_variable: int  # dropdown
    appearance_condition_constant: int  # spinner
    appearance_condition_comparison_content: int  # small dropdown
    appearance_condition_total_score: int

    variation_setting_present: int
    variation_variable: int
    variation_constant: int

    strings_count: int  # 2

    world_name: StdString
    start_stage: StdString


class WorldEvent(NamedTuple):
    header: int
    placement_x: int
    placement_y: int

    strings_count: int  # 1
    name: StdString

    pages_count: int
    pages: Tuple[WorldEventPage, ...]


class WorldMapFile(NamedTuple):
    version: int
    settings_count: int

    horizontal_width: int
    vertical_width: int

    chunk_width: int
    chunk_pow: int

    initial_position_x: int
    initial_position_y: int

    background_index: int
    use_background: int

    strings_count: int  # 2

    name: StdString
    bg_path: StdString

    tiles_types_count: int
    world_chip_data: Tuple[WorldChip, ...]

    tiles_count: int
    map_chip_data: Tuple[int, ...]

    events_count: int
    event_data: Tuple[WorldEvent, ...]

    events_pal_count: int
    event_template_data: Tuple[WorldEvent, ...]


class WorldMapDecodeResult(NamedTuple):
    world_map: WorldMapFile
    end_offset: int


def read_repeated(f: ArchiveFile, count, element_from_binary, limit: Optional[int] = None):
    """Decode exactly count elements, in order, with element_from_binary(f).

    Nothing is checked against the bytes remaining; a short buffer surfaces as
    EWmapInsufficientData from the element that runs out. limit, when given,
    rejects the count before anything is decoded.
    """
    if limit is not None and count > limit:
        raise EWmapCountLimit(f.tell(), count, limit)
    return tuple(element_from_binary(f) for _ in range(count))


def u32_from_binary(f: ArchiveFile):
    return f.read_u32()


def std_string_from_binary(f: ArchiveFile):
    length = f.read_u32()
    # a declared length of 0 or 1 is never followed by payload bytes
    if length > 1:
        data = f.read(length)
    else:
        data = b''
    return StdString(length, data)


def world_chip_from_binary(f: ArchiveFile):
    header = f.read_u32()
    tile_index = f.read_u32()
    locked = f.read_u32()
    graphic = f.read_u32()
    strings_count = f.read_u32()
    name = std_string_from_binary(f)
    unused_string = std_string_from_binary(f)
    return WorldChip(header, tile_index, locked, graphic, strings_count, name, unused_string)


def world_event_page_from_binary(f: ArchiveFile):
    (
        start, event_type, graphic,
        world_number, pass_without_clear, play_after_clear, on_game_clear,
        appearance_condition_world,
        appearance_condition_variable,
        appearance_condition_constant,
        appearance_condition_comparison_content,
        appearance_condition_total_score,
        variation_setting_present, variation_variable, variation_constant,
        strings_count,
    ) = [f.read_u32() for _ in range(16)]

    world_name = std_string_from_binary(f)
    start_stage = std_string_from_binary(f)

    return WorldEventPage(
        start=start,
        event_type=event_type,
        graphic=graphic,
        world_number=world_number,
        pass_without_clear=pass_without_clear,
        play_after_clear=play_after_clear,
        on_game_clear=on_game_clear,
        appearance_condition_world=appearance_condition_world,
        appearance_condition_variable=appearance_condition_variable,
        appearance_condition_constant=appearance_condition_constant,
        appearance_condition_comparison_content=appearance_condition_comparison_content,
        appearance_condition_total_score=appearance_condition_total_score,
        variation_setting_present=variation_setting_present,
        variation_variable=variation_variable,
        variation_constant=variation_constant,
        strings_count=strings_count,
        world_name=world_name,
        start_stage=start_stage,
    )


def world_event_from_binary(f: ArchiveFile, limit: Optional[int] = None):
    header = f.read_u32()
    placement_x = f.read_u32()
    placement_y = f.read_u32()
    strings_count = f.read_u32()
    name = std_string_from_binary(f)
    pages_count = f.read_u32()
    pages = read_repeated(f, pages_count, world_event_page_from_binary, limit)
    return WorldEvent(header, placement_x, placement_y, strings_count, name, pages_count, pages)


def world_map_from_binary(f: ArchiveFile, limit: Optional[int] = None, logger=None):
    def section(name):
        if logger is not None:
            logger.debug('WorldMap: {} @ 0x{:08x}'.format(name, f.tell()))

    def event_from_binary(fe):
        return world_event_from_binary(fe, limit)

    section('header')
    version = f.read_u32()
    settings_count = f.read_u32()
    horizontal_width = f.read_u32()
    vertical_width = f.read_u32()
    chunk_width = f.read_u32()
    chunk_pow = f.read_u32()
    initial_position_x = f.read_u32()
    initial_position_y = f.read_u32()
    background_index = f.read_u32()
    use_background = f.read_u32()
    strings_count = f.read_u32()
    name = std_string_from_binary(f)
    bg_path = std_string_from_binary(f)

    section('world chips')
    tiles_types_count = f.read_u32()
    world_chip_data = read_repeated(f, tiles_types_count, world_chip_from_binary, limit)

    section('map chips')
    tiles_count = f.read_u32()
    map_chip_data = read_repeated(f, tiles_count, u32_from_binary, limit)

    # NOTE both event lists repeat tiles_count times, not events_count / events_pal_count.
    # Existing files are read this way, keep it until the intended bound is confirmed.
    section('events')
    events_count = f.read_u32()
    event_data = read_repeated(f, tiles_count, event_from_binary, limit)

    section('event templates')
    events_pal_count = f.read_u32()
    event_template_data = read_repeated(f, tiles_count, event_from_binary, limit)

    section('end')

    return WorldMapFile(
        version=version,
        settings_count=settings_count,
        horizontal_width=horizontal_width,
        vertical_width=vertical_width,
        chunk_width=chunk_width,
        chunk_pow=chunk_pow,
        initial_position_x=initial_position_x,
        initial_position_y=initial_position_y,
        background_index=background_index,
        use_background=use_background,
        strings_count=strings_count,
        name=name,
        bg_path=bg_path,
        tiles_types_count=tiles_types_count,
        world_chip_data=world_chip_data,
        tiles_count=tiles_count,
        map_chip_data=map_chip_data,
        events_count=events_count,
        event_data=event_data,
        events_pal_count=events_pal_count,
        event_template_data=event_template_data,
    )


def world_map_from_bytes(buffer, max_count=None, debug=False, logger=None):
    f = ArchiveFile(buffer, debug=debug, logger=logger)
    world_map = world_map_from_binary(f, limit=max_count, logger=logger if debug else None)
    return WorldMapDecodeResult(world_map, f.tell())


def world_map_load(filename, max_count=None, debug=False, logger=None):
    with open(filename, 'rb') as fin:
        buffer = fin.read()

    if logger is not None:
        logger.log('Decoding {}: {} bytes'.format(filename, len(buffer)))

    return world_map_from_bytes(buffer, max_count=max_count, debug=debug, logger=logger)
