import os
from importlib.resources import files

import yaml

from mapmaker.log import get_logger
from mapmaker.geometry.projection import Interval, InvalidIntervalError

#- cached content of the default extents files, keyed by path
_extents = dict()

def mapmaker_data_dir():
    '''
    Returns mapmaker data dir, $MAPMAKER_DATA if set
    '''
    if "MAPMAKER_DATA" in os.environ :
        return os.environ["MAPMAKER_DATA"]
    else :
        return str(files('mapmaker') / 'data')

def extents_filename():
    return os.path.join(mapmaker_data_dir(), 'extents.yaml')

def load_extents(filename=None):
    '''
    Reads named extents from a yaml file

    Args:
        filename (optional): yaml file with entries
            name: [left_x, left_y, right_x, right_y]
            default is extents.yaml in the data dir

    Returns dict name -> Interval
    '''
    path = filename if filename is not None else extents_filename()
    if filename is None and path in _extents:
        return _extents[path]

    log = get_logger()
    log.debug("loading {}".format(path))

    with open(path) as ifile :
        entries = yaml.safe_load(ifile)

    if not isinstance(entries, dict) :
        message = "{} should contain a mapping of name -> [left_x, left_y, right_x, right_y]".format(path)
        log.error(message)
        raise ValueError(message)

    extents = dict()
    for name, corners in entries.items() :
        if not isinstance(corners, (list, tuple)) or len(corners) != 4 :
            message = "extent '{}' in {}: expected 4 values, got {}".format(name, path, corners)
            log.error(message)
            raise ValueError(message)
        try :
            extents[name] = Interval(*corners)
        except InvalidIntervalError as e :
            raise InvalidIntervalError("extent '{}' in {}: {}".format(name, path, e)) from e

    if filename is None :
        _extents[path] = extents
    return extents

def get_extent(name, filename=None):
    '''
    Returns the Interval named name in the extents file
    '''
    extents = load_extents(filename)
    if name not in extents :
        message = "unknown extent '{}', known are {}".format(name, sorted(extents.keys()))
        get_logger().error(message)
        raise KeyError(message)
    return extents[name]
