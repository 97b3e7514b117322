"""Result types shared by the EPC-96 codecs."""

from collections import namedtuple


class EpcScheme(object):
    SGTIN_96 = 'sgtin-96'
    GID_96 = 'gid-96'


_EpcResult = namedtuple('EpcResult', ['scheme', 'hex', 'binary', 'uri',
                                      'id_uri', 'fields'])


class EpcResult(_EpcResult):
    '''A decoded (or freshly encoded) 96-bit tag.

    scheme  - one of the EpcScheme values, tells the variants apart
    hex     - 24 uppercase hex characters
    binary  - 96 '0'/'1' characters, MSB first
    uri     - tag URI (urn:epc:tag:...), keeps the filter value
    id_uri  - pure identity URI (urn:epc:id:...)
    fields  - dict of the decoded components
    '''
    __slots__ = ()

    def as_dict(self):
        return dict(self._asdict())


class Sgtin96Result(EpcResult):
    __slots__ = ()


class Gid96Result(EpcResult):
    __slots__ = ()
