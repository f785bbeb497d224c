"""
Hypothesis Strategies for Property-Based Testing

Custom strategies for generating short ids, file names and storage keys.
"""

from hypothesis import strategies as st

from shortdrop.domain.file_storage.value_objects import SHORT_ID_ALPHABET, SHORT_ID_LENGTH


# =============================================================================
# Primitive Strategies
# =============================================================================

def short_ids():
    """Generate well-formed short id strings."""
    return st.text(alphabet=SHORT_ID_ALPHABET, min_size=SHORT_ID_LENGTH, max_size=SHORT_ID_LENGTH)


@st.composite
def malformed_short_ids(draw) -> str:
    """Generate strings that are not valid short ids."""
    variant = draw(st.sampled_from(["wrong_length", "bad_character"]))

    if variant == "wrong_length":
        length = draw(
            st.integers(min_value=0, max_value=20).filter(lambda n: n != SHORT_ID_LENGTH)
        )
        return draw(st.text(alphabet=SHORT_ID_ALPHABET, min_size=length, max_size=length))

    valid = draw(short_ids())
    position = draw(st.integers(min_value=0, max_value=SHORT_ID_LENGTH - 1))
    bad = draw(st.characters().filter(lambda c: c not in SHORT_ID_ALPHABET))
    return valid[:position] + bad + valid[position + 1:]


@st.composite
def client_file_names(draw) -> str:
    """Generate arbitrary file names as a client might declare them."""
    base = draw(st.text(min_size=0, max_size=40))
    directory = draw(st.sampled_from(["", "dir/", "../", "C:\\Users\\me\\", "a/b\\"]))
    return directory + base


@st.composite
def plain_file_names(draw) -> str:
    """Generate file names the policy keeps unchanged."""
    name = draw(
        st.text(
            alphabet=st.characters(
                exclude_categories=("Cc", "Cs", "Zl", "Zp"),
                exclude_characters="/\\",
            ),
            min_size=1,
            max_size=40,
        )
    )
    name = name.strip()
    if name in ("", ".", ".."):
        name = "file.bin"
    return name
