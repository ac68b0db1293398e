import sys
import argparse
from wmap.errors import EWmapErrorParse, EWmapSettingsError
from wmap.ff_world_map import world_map_load
from wmap.dump import dump_to_string
from wmap.export_map import export_map_png
from wmap.settings import DecodeSettings
from wmap.util import Logger


def main(argv=None):
    options = argparse.ArgumentParser(description='Decode and dump a WorldMap.dat file')
    options.add_argument('file', nargs='?', default='./WorldMap.dat')
    options.add_argument('--png', type=str, default=None, help='write a tile index preview image')
    options.add_argument('--scale', type=int, default=1)
    options.add_argument('--debug', action='store_true', default=None)
    options.add_argument('--max-count', type=int, default=None, help='reject larger declared counts')
    options.add_argument('--settings', type=str, default=None)
    args = options.parse_args(argv)

    try:
        settings = DecodeSettings.load(args.settings) if args.settings else DecodeSettings()
    except EWmapSettingsError as e:
        Logger().error(e)
        return 2

    if args.debug is not None:
        settings.debug = args.debug
    if args.max_count is not None:
        settings.max_count = args.max_count

    logger = Logger(settings.working_dir)

    try:
        result = world_map_load(args.file, max_count=settings.max_count, debug=settings.debug, logger=logger)
    except OSError as e:
        logger.error('Cannot read {}: {}'.format(args.file, e))
        return 1
    except EWmapErrorParse as e:
        logger.error('Decoding {} stopped: {}'.format(args.file, e))
        return 1

    print(dump_to_string(result.world_map, settings.text_encoding))
    logger.log('Decoded {} bytes'.format(result.end_offset))

    if args.png is not None:
        try:
            export_map_png(result.world_map, args.png, scale=args.scale)
        except (ValueError, OSError) as e:
            logger.warning('PNG not written: {}'.format(e))
            return 1
        logger.log('Exported {}'.format(args.png))

    return 0


if __name__ == "__main__":
    sys.exit(main())
