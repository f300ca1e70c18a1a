import pytest

from msavalidator import (
    MSA,
    EmptyAlignmentError,
    InvalidFormatError,
    LengthMismatchError,
    NoDataError,
    ParseError,
    ProblemHeader,
)


@pytest.fixture
def msa():
    return MSA()


def test_single_record(msa):
    msa.set_seqs(">only\nACGT\n")

    assert msa.get_seq_count() == 1
    assert msa.get_seqs() == ">only\nACGT"
    assert msa.alignment_width == 4


def test_count_matches_number_of_records(msa):
    msa.set_seqs(">s1\nACGT\n>s2\nA-GT\n>s3\nAC-T\n>s4\n----\n")
    assert msa.get_seq_count() == 4


def test_length_mismatch_names_first_offending_header(msa):
    with pytest.raises(LengthMismatchError, match="Not a valid MSA: b") as excinfo:
        msa.set_seqs(">a\nACGT\n>b\nAAC\n")

    assert excinfo.value.header == "b"
    assert isinstance(excinfo.value, ParseError)


def test_length_mismatch_reports_first_of_several(msa):
    with pytest.raises(LengthMismatchError) as excinfo:
        msa.set_seqs(">a\nACGT\n>b\nACGT\n>c\nAC\n>d\nA\n")
    assert excinfo.value.header == "c"


def test_ragged_file_is_rejected(msa, msa_data_dir):
    with pytest.raises(LengthMismatchError) as excinfo:
        msa.set_seqs((msa_data_dir / "ragged.fasta").read_bytes())
    assert excinfo.value.header == "seq3|rat"
    assert not msa.is_loaded


def test_header_joins_identifier_and_description_without_separator(msa):
    msa.set_seqs(">seq1 human|chr1\nACGT\n>seq2\nACGT\n")

    headers = [record.header for record in msa.records]
    assert headers == ["seq1human|chr1", "seq2"]


def test_wrapped_sequences_are_joined(msa):
    msa.set_seqs(">a\nAC\nGT\n>b\nA\nC\nG\nT\n")
    assert msa.get_seqs() == ">a\nACGT\n>b\nACGT"


def test_wrapped_file(msa, msa_data_dir):
    msa.set_seqs((msa_data_dir / "hiv_env_wrapped.fasta").read_bytes())

    assert msa.get_seq_count() == 4
    assert msa.alignment_width == 87
    assert [record.index for record in msa.records] == [1, 2, 3, 4]


def test_check_headers_reports_mismatching_field_counts(msa):
    msa.set_seqs(">a|b|c\nACGT\n>x|y\nAACG\n")

    assert msa.check_headers(3) == [ProblemHeader(index=2, header="x|y")]


def test_check_headers_empty_when_all_match(msa):
    msa.set_seqs(">a|b|c\nACGT\n>d|e|f\nAACG\n")
    assert msa.check_headers(3) == []


def test_check_headers_on_file(msa, msa_data_dir):
    msa.set_seqs((msa_data_dir / "hiv_env_wrapped.fasta").read_bytes())

    problems = [problem.to_dict() for problem in msa.check_headers(4)]
    assert problems == [
        {"index": 3, "header": "A1|KE|2000AF457052"},
        {"index": 4, "header": "D|UG|CD"},
    ]


@pytest.mark.parametrize(
    "expected_fields,problem_indices",
    [
        (1, [2, 3, 4]),
        (2, [1, 3, 4]),
        (3, [1, 2, 4]),
        (4, [1, 2, 3]),
        (5, [1, 2, 3, 4]),
    ],
)
def test_check_headers_counts_split_parts(msa, expected_fields, problem_indices):
    msa.set_seqs(">plain\nAC\n>a|b\nAC\n>a||c\nAC\n>|||\nAC\n")

    problems = msa.check_headers(expected_fields)
    assert [problem.index for problem in problems] == problem_indices


def test_check_headers_does_not_mutate_state(msa):
    msa.set_seqs(">a|b\nAC\n>c\nAC\n")
    before = msa.get_seqs()

    msa.check_headers(2)
    msa.check_headers(7)

    assert msa.get_seqs() == before
    assert msa.get_seq_count() == 2


def test_round_trip(msa):
    msa.set_seqs(">s1 first|x\nAC-\nGT\n>s2\nACG\nT-\n>s3|y|z\n--A\nCG\n")
    first = msa.get_seqs()

    other = MSA()
    other.set_seqs(first)

    assert other.get_seqs() == first
    assert [r.header for r in other.records] == [r.header for r in msa.records]
    assert [r.sequence for r in other.records] == [r.sequence for r in msa.records]


def test_output_has_no_trailing_newline(msa):
    msa.set_seqs(">a\nACGT\n\n\n>b\nACGT\n\n")
    assert not msa.get_seqs().endswith("\n")


@pytest.mark.parametrize(
    "query",
    [
        lambda m: m.get_seq_count(),
        lambda m: m.get_seqs(),
        lambda m: m.check_headers(3),
        lambda m: m.alignment_width,
        lambda m: m.records,
    ],
)
def test_queries_before_upload_raise_no_data(msa, query):
    with pytest.raises(NoDataError, match="No sequences set"):
        query(msa)


def test_not_fasta_is_invalid_format(msa):
    with pytest.raises(InvalidFormatError, match="Not a valid FASTA"):
        msa.set_seqs("CLUSTAL W (1.83) multiple sequence alignment\n\nseq1 ACGT\n")


@pytest.mark.parametrize("text", ["", "\n\n", "   \n\t\n"])
def test_empty_input_is_rejected(msa, text):
    with pytest.raises(EmptyAlignmentError):
        msa.set_seqs(text)


def test_second_upload_replaces_state(msa):
    msa.set_seqs(">a|1\nACGT\n>b|2\nACGT\n")
    msa.set_seqs(">c\nAA\n")

    assert msa.get_seq_count() == 1
    assert msa.get_seqs() == ">c\nAA"
    assert msa.check_headers(1) == []


@pytest.mark.parametrize(
    "bad_upload,error",
    [
        (">a\nACGT\n>b\nAC\n", LengthMismatchError),
        ("not fasta\n", InvalidFormatError),
        ("", EmptyAlignmentError),
    ],
)
def test_failed_upload_keeps_previous_state(msa, bad_upload, error):
    msa.set_seqs(">keep\nACGT\n")

    with pytest.raises(error):
        msa.set_seqs(bad_upload)

    assert msa.get_seqs() == ">keep\nACGT"


def test_failed_first_upload_leaves_msa_empty(msa):
    with pytest.raises(LengthMismatchError):
        msa.set_seqs(">a\nACGT\n>b\nAC\n")

    assert not msa.is_loaded
    with pytest.raises(NoDataError):
        msa.get_seq_count()


def test_malformed_header_is_skipped_but_counted(msa):
    msa.set_seqs(b">a\nACGT\n>\xff\xfe\nTTTT\n>c\nGGGG\n")

    assert msa.get_seq_count() == 2
    assert [record.index for record in msa.records] == [1, 3]
    assert msa.get_seqs() == ">a\nACGT\n>c\nGGGG"


def test_skipped_record_is_not_length_checked(msa):
    msa.set_seqs(b">a\nACGT\n>bad\xc3\nTT\n>c\nGGGG\n")
    assert msa.get_seq_count() == 2


def test_only_malformed_headers_is_empty(msa):
    with pytest.raises(EmptyAlignmentError):
        msa.set_seqs(b">\xff\nACGT\n")


def test_invalid_sequence_bytes_are_replaced(msa):
    msa.set_seqs(b">a\nA\xffC\n>b\nAXXXC\n")

    assert msa.records[0].sequence == "A\ufffdC"
    assert msa.alignment_width == 5


def test_width_is_measured_in_utf8_bytes(msa):
    with pytest.raises(LengthMismatchError) as excinfo:
        msa.set_seqs(b">a\nA\xffC\n>b\nAXC\n")
    assert excinfo.value.header == "b"


def test_spaces_inside_sequences_are_kept(msa):
    msa.set_seqs(">a\nAC GT\n>b\nACGTA\n")

    assert msa.alignment_width == 5
    assert msa.get_seqs() == ">a\nAC GT\n>b\nACGTA"


def test_trailing_description_text_is_kept(msa):
    msa.set_seqs(">a x|y \nACGT\n>b\nACGT\n")
    assert msa.records[0].header == "ax|y "


def test_repr(msa):
    assert repr(msa) == "MSA(empty)"
    msa.set_seqs(">a\nACG\n>b\nACG\n")
    assert repr(msa) == "MSA(sequences=2, width=3)"
