# repeatprf

Tools for building DNA repeat profiles and for computing statistics on
four-channel sequencing traces.

## Generating a profile

The `genprf` command writes a generalized profile (PROSITE matrix format)
to standard output for a DNA motif made of the letters `A`, `C`, `G` and `T`:

```
genprf CAG
```

Give a second argument (any value) to build a profile that may also begin
with an insertion (`B1=*` in the defaults and `BI=0` on the first insert
line):

```
genprf CAG at_start
```

Without a sequence the command prints its usage and exits with status 1.
An empty sequence, or one holding anything other than `A`, `C`, `G` or `T`,
is rejected with an error message and exit status 1.

From Python:

```python
from repeatprf.genprf import generate_profile, validate_sequence

validate_sequence("CAG")
text = generate_profile("CAG", at_start=False)
print(text)
```

`validate_sequence` returns the sequence unchanged or raises
`InvalidSequenceError` (a `ValueError`). `generate_profile` validates the
sequence and returns the whole profile text, ending with `//`.

## Hole regions and alignments

`repeatprf.regions` works on the annotated regions of a sequencing hole:

- `RegionType` (`ADAPTER`, `INSERT`, `HQ_REGION`) and `HoleRegion`
  (`type`, `start`, `stop`, `quality`) describe the regions.
- `hq_region(regions, hq_threshold, keep_invalid=False)` returns the
  `(start, stop)` of the high-quality region. The last HQ region is used
  (the first region if there is none); a quality below the threshold sets
  the stop to 0; with `keep_invalid`, a hole whose HQ region is empty spans
  `0` to the end of its largest insert. An empty region list raises
  `ValueError`.
- `reverse_complement_mapping(mapping)` swaps the A/T and C/G entries of a
  letter-indexed alphabet mapping.
- `merge_alignments(forward, reverse, sequence_length)` joins forward
  `AlignmentSpan` results with reverse-strand ones whose rows are moved back
  onto the forward strand.
- `mark_adapters` and `mark_alignments` return a frame-type string with the
  frames covered by adapters marked `A` or by alignments marked `R`.

## Trace statistics

`repeatprf.tracestat` holds the computations behind trace analysis:

- `count_bases`, `expand_frames` – counts of T, G, A and C, and base calls
  spread over their frames (`N` where no base covers a frame).
- `decoded_mean`, `histogram_lines` – the mean trace value from a histogram
  of encoded values and a decode table, and text lines for the histogram.
- `ContingencyTable` with `sensitivity()` and `specificity()`, and
  `roc_lines` for ROC curve output.
- `frame_dna_text` – frame base calls collapsed into text wrapped at a
  given width, with bases on frames of type `S` in lower case.
- `stair_traces`, `window_means` – stair flattening and sliding-window means
  of multi-channel traces.
- `transition_stats`, `cumulative_ranks` – per-channel transition counts
  between consecutive encoded values, and cumulative ranks of encoded values.
- `trace_lines` – tab-separated lines of frame number, four channels, base
  and type.

## What the package does not do

The package does not read sequencing data files, trace files or profile
files, and it does not align profiles against reads. The functions in
`repeatprf.regions` and `repeatprf.tracestat` take regions, alignments,
traces and base calls that are already in memory, and return values or text
lines; writing them to files is left to the caller. `genprf` is the only
command.

## Running the tests

```
pip install -e ".[test]"
pytest
```