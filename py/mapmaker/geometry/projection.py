"""
Axis-aligned mappings between two rectangular extents

A Projection maps a point of a "source" rectangle onto the point at the
same relative position of a "target" rectangle, independently along x and y:

    tx = target.left_x + (target.diff_x / source.diff_x) * (x - source.left_x)
    ty = target.left_y + (target.diff_y / source.diff_y) * (y - source.left_y)

Rectangles are Interval objects, defined by their (min x, min y) corner
"left" and their (max x, max y) corner "right". There is no rotation, no
shear and no clipping: points outside of the source extrapolate linearly
outside of the target.

Coordinates may be any numbers supporting <, -, * and / (float, int,
fractions.Fraction, numpy scalars). translate() also accepts sequences or
numpy arrays of coordinates and returns numpy arrays.
"""

import json

import numpy as np

from mapmaker.log import get_logger


class InvalidIntervalError(ValueError):
    """Raised when the corners of an Interval are not strictly increasing"""
    pass


class Interval(object):
    """
    Axis-aligned rectangle, immutable

    Args:
        left_x, left_y: the (min x, min y) corner
        right_x, right_y: the (max x, max y) corner

    Raises InvalidIntervalError unless left_x < right_x and left_y < right_y
    """
    __slots__ = ('_left', '_right', '_diff_x', '_diff_y')

    def __init__(self, left_x, left_y, right_x, right_y):
        if not (left_x < right_x and left_y < right_y):
            message = 'invalid interval, corners must be strictly increasing: left=({},{}) right=({},{})'.format(
                left_x, left_y, right_x, right_y)
            get_logger().error(message)
            raise InvalidIntervalError(message)
        object.__setattr__(self, '_left', (left_x, left_y))
        object.__setattr__(self, '_right', (right_x, right_y))
        object.__setattr__(self, '_diff_x', right_x - left_x)
        object.__setattr__(self, '_diff_y', right_y - left_y)

    @classmethod
    def from_points(cls, left, right):
        """
        Same as Interval(left_x, left_y, right_x, right_y) with the
        corners given as (x, y) pairs
        """
        left_x, left_y = left
        right_x, right_y = right
        return cls(left_x, left_y, right_x, right_y)

    def __setattr__(self, name, value):
        raise AttributeError('Interval is immutable')

    def __reduce__(self):
        return (Interval, tuple(self.tolist()))

    @property
    def left(self):
        return self._left

    @property
    def right(self):
        return self._right

    @property
    def diff_x(self):
        return self._diff_x

    @property
    def diff_y(self):
        return self._diff_y

    width = diff_x
    height = diff_y

    def corners(self):
        '''Returns the 4 corners, counter-clockwise from left'''
        (lx, ly), (rx, ry) = self._left, self._right
        return [(lx, ly), (rx, ly), (rx, ry), (lx, ry)]

    def contains(self, x, y):
        '''True where (x,y) is inside the rectangle, edges included'''
        (lx, ly), (rx, ry) = self._left, self._right
        return (x >= lx) & (x <= rx) & (y >= ly) & (y <= ry)

    def tolist(self):
        return [self._left[0], self._left[1], self._right[0], self._right[1]]

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self._left == other._left and self._right == other._right

    def __hash__(self):
        return hash((self._left, self._right))

    def __repr__(self):
        return 'Interval({}, {}, {}, {})'.format(*self.tolist())


UNIT_INTERVAL = Interval(0.0, 0.0, 1.0, 1.0)
SYMMETRIC_UNIT_INTERVAL = Interval(-1.0, -1.0, 1.0, 1.0)

#- variant tags of Projection
AFFINE = 'affine'
IDENTITY = 'identity'
UNIT = 'unit'
SYMMETRIC_UNIT = 'symmetric_unit'
_kinds = (AFFINE, IDENTITY, UNIT, SYMMETRIC_UNIT)


class Projection(object):
    """
    Maps points of the source Interval onto the target Interval

    Args:
        source: Interval
        target: Interval

    Optional:
        kind: variant tag, see identity_projection(), unit_projection()
            and symmetric_unit_projection(). Only 'identity' changes
            the behavior of translate().
    """
    __slots__ = ('_source', '_target', '_kind', '_scale_x', '_scale_y')

    def __init__(self, source, target, kind=AFFINE):
        if not isinstance(source, Interval) or not isinstance(target, Interval):
            raise TypeError('source and target must be Interval, got {} and {}'.format(
                type(source).__name__, type(target).__name__))
        if kind not in _kinds:
            message = 'unknown projection kind {}, should be one of {}'.format(kind, _kinds)
            get_logger().error(message)
            raise ValueError(message)
        if kind == IDENTITY and source != target:
            message = 'identity projection requires target == source'
            get_logger().error(message)
            raise ValueError(message)

        object.__setattr__(self, '_source', source)
        object.__setattr__(self, '_target', target)
        object.__setattr__(self, '_kind', kind)
        # diff_x, diff_y > 0 for any valid Interval, no zero division here
        object.__setattr__(self, '_scale_x', target.diff_x / source.diff_x)
        object.__setattr__(self, '_scale_y', target.diff_y / source.diff_y)

        get_logger().debug('{} projection {} -> {}'.format(kind, source, target))

    def __setattr__(self, name, value):
        raise AttributeError('Projection is immutable')

    def __reduce__(self):
        return (Projection, (self._source, self._target, self._kind))

    @property
    def source(self):
        return self._source

    @property
    def target(self):
        return self._target

    @property
    def kind(self):
        return self._kind

    @property
    def scale(self):
        '''(x, y) scale factors target.diff / source.diff'''
        return self._scale_x, self._scale_y

    def translate(self, x, y=None):
        """
        Maps source coordinates to target coordinates

        Args:
            x, y: source coordinates, scalars or arrays of same shape.
                  If y is None, x is a single (x, y) pair.

        Returns tuple (tx, ty) of target coordinates. Array inputs give
        numpy arrays; an identity projection returns them without arithmetic.
        """
        if y is None:
            x, y = x

        if not (np.isscalar(x) and np.isscalar(y)):
            x = np.asarray(x)
            y = np.asarray(y)

        if self._kind == IDENTITY:
            return x, y

        sx, sy = self._source.left
        tx, ty = self._target.left
        return tx + self._scale_x * (x - sx), ty + self._scale_y * (y - sy)

    def inverse(self):
        '''Returns the Projection from target back to source'''
        if self._kind == IDENTITY:
            return self
        return Projection(self._target, self._source)

    def tojson(self):
        params = dict()
        params['method'] = 'Interval Projection'
        params['version'] = '1'
        params['kind'] = self._kind
        params['source'] = [float(v) for v in self._source.tolist()]
        params['target'] = [float(v) for v in self._target.tolist()]
        return json.dumps(params)

    @classmethod
    def fromjson(cls, jsonstring):
        log = get_logger()
        params = json.loads(jsonstring)
        if params.get('method') != 'Interval Projection' or params.get('version') != '1':
            message = 'not a version 1 Interval Projection: method={} version={}'.format(
                params.get('method'), params.get('version'))
            log.error(message)
            raise ValueError(message)
        for key in ['source', 'target']:
            if not isinstance(params.get(key), list) or len(params[key]) != 4:
                message = "Interval Projection '{}' should be [left_x, left_y, right_x, right_y], got {}".format(
                    key, params.get(key))
                log.error(message)
                raise ValueError(message)
        source = Interval(*params['source'])
        target = Interval(*params['target'])
        return cls(source, target, kind=params.get('kind', AFFINE))

    @classmethod
    def read_jsonfile(cls, filename):
        with open(filename) as fx:
            s = fx.read()
        return cls.fromjson(s)

    def write_jsonfile(self, filename):
        with open(filename, 'w') as fx:
            fx.write(self.tojson())

    def __eq__(self, other):
        if not isinstance(other, Projection):
            return NotImplemented
        return (self._kind == other._kind and self._source == other._source
                and self._target == other._target)

    def __hash__(self):
        return hash((self._kind, self._source, self._target))

    def __repr__(self):
        return 'Projection({!r}, {!r}, kind={!r})'.format(self._source, self._target, self._kind)

    def __str__(self):
        return "mapmaker.geometry.projection.Projection\n kind= {}\n source= {}\n target= {}\n scale_x= {:g}\n scale_y= {:g}\n".format(
            self._kind, self._source.tolist(), self._target.tolist(),
            float(self._scale_x), float(self._scale_y))


def identity_projection(source):
    '''Projection of source onto itself, translate() returns its input'''
    return Projection(source, source, kind=IDENTITY)

def unit_projection(source):
    '''Projection of source onto the unit square (0,0)-(1,1)'''
    return Projection(source, UNIT_INTERVAL, kind=UNIT)

def symmetric_unit_projection(source):
    '''Projection of source onto the square (-1,-1)-(1,1)'''
    return Projection(source, SYMMETRIC_UNIT_INTERVAL, kind=SYMMETRIC_UNIT)


def apply_projection(points, projection, xcol='X', ycol='Y', outx=None, outy=None):
    """
    Projects two coordinate columns of a table

    Args:
        points: astropy.table.Table, or any dict-like of column arrays
        projection: Projection

    Optional:
        xcol, ycol: names of the input columns
        outx, outy: names of the output columns, default is to
            overwrite xcol and ycol

    Returns points, with output columns added or replaced
    """
    if outx is None:
        outx = xcol
    if outy is None:
        outy = ycol

    tx, ty = projection.translate(np.asarray(points[xcol]), np.asarray(points[ycol]))
    #- new columns must not share memory with the input ones
    if outx != xcol:
        tx = np.array(tx)
    if outy != ycol:
        ty = np.array(ty)
    points[outx] = tx
    points[outy] = ty

    return points
