"""Constants used throughout the MSA validator."""

# Marker that opens every FASTA header line
FASTA_HEADER_MARKER = ">"

# Separates identifier from description on a FASTA header line
HEADER_ID_SEPARATOR = " "

# Field delimiter for the header schema check
HEADER_FIELD_DELIMITER = "|"

# User-facing error messages
INVALID_FORMAT_MESSAGE = "Not a valid FASTA Multiple Sequence Alignment."
LENGTH_MISMATCH_MESSAGE = "Not a valid MSA: {header}"
EMPTY_ALIGNMENT_MESSAGE = "No sequences found. Please upload a valid MSA."
NO_DATA_MESSAGE = "No sequences set. Please upload a valid MSA."
MALFORMED_HEADER_MESSAGE = "Header of record {index} is not valid UTF-8."
