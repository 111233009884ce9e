"""Shared NEX type tables.

Raw DDL spellings are renamed to the names used on the NintendoClients
wiki, and names that have an entry in the wiki's common-type glossary are
linked to it.
"""

# Raw DDL token -> canonical wiki name
COMMON_TYPE_RENAMES: dict[str, str] = {
    # Byte lists are buffers, whichever list spelling is used
    "qvector<byte>": "NexBuffer",
    "qlist<byte>": "NexBuffer",
    "std_list<byte>": "NexBuffer",
    "byte": "u8",
    "uint16": "u16",
    "uint32": "u32",
    "uint64": "u64",
    "int8": "i8",
    "int16": "i16",
    "int32": "i32",
    "int64": "i64",
    "string": "NexString",
    "bool": "bool",
    "datetime": "DateTime",
    "qresult": "ResultCode",
    "stationurl": "StationURL",
    "qBuffer": "NexQBuffer",
    "buffer": "NexBuffer",
    "ResultRange": "ResultRange",
    "variant": "Variant",
    # Only spelling seen so far; other any<...> forms go through AnyWrapper
    "any<Data,string>": "DataHolder",
}

# Glossary entry name -> anchor on the common types page
COMMON_TYPE_ANCHORS: dict[str, str] = {
    "String": "string",
    "Buffer": "buffer",
    "qBuffer": "qbuffer",
    "List": "list",
    "Map": "map",
    "PID": "pid",
    "Result": "result",
    "DateTime": "datetime",
    "StationURL": "stationurl",
    "Variant": "variant",
    "Structure": "structure",
    "Data": "data",
    "AnyDataHolder": "anydataholder",
    "RVConnectionData": "rvconnectiondata",
    "ResultRange": "resultrange",
}

# Equivalent spellings of the list container
LIST_CONTAINERS: frozenset[str] = frozenset({"std_list", "qvector", "qlist"})

ANY_WRAPPER = "any"

LIST_GLOSSARY_ENTRY = "List"
