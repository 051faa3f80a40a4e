"""Fixed TypeScript fragments emitted once per generated module."""

EXPORT_COMMENT = """/**
* This file was @generated using pocketbase-typegen
*/"""

RECORD_TYPE_COMMENT = "// Record types for each collection"

RESPONSE_TYPE_COMMENT = "// Response types include system fields and match responses from the PocketBase API"

DATE_STRING_TYPE_NAME = "IsoDateString"
RECORD_ID_STRING_NAME = "RecordIdString"

ALIAS_TYPE_DEFINITIONS = f"""// Alias types for improved usability
export type {DATE_STRING_TYPE_NAME} = string
export type {RECORD_ID_STRING_NAME} = string"""

BASE_SYSTEM_FIELDS_NAME = "BaseSystemFields"
AUTH_SYSTEM_FIELDS_NAME = "AuthSystemFields"

BASE_SYSTEM_FIELDS_DEFINITION = f"""// System fields
export type {BASE_SYSTEM_FIELDS_NAME} = {{
\tid: {RECORD_ID_STRING_NAME}
\tcreated: {DATE_STRING_TYPE_NAME}
\tupdated: {DATE_STRING_TYPE_NAME}
\tcollectionId: string
\tcollectionName: Collections
\texpand?: {{ [key: string]: any }}
}}"""

AUTH_SYSTEM_FIELDS_DEFINITION = f"""export type {AUTH_SYSTEM_FIELDS_NAME} = {{
\temail: string
\temailVisibility: boolean
\tusername: string
\tverified: boolean
}} & {BASE_SYSTEM_FIELDS_NAME}"""

PART_SEPARATOR = "\n\n"
