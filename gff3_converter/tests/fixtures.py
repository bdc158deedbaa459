#!/usr/bin/env python3

"""
Sample upstream records shared by the parser, driver and CLI tests.
"""

GMAP_RECORD_ACC1 = """\
>ACC1 test transcript
Paths (1):
  Path 1: query 1..72 (72 bp) => genome ACC1:100..200 (101 bp)
    cDNA direction: sense
    Genomic pos: ACC1:100..200 (+ strand)
    Accessions: ACC1:100..200 (out of 5000 bp)
    Number of exons: 2
    Coverage: 100.0 (query length: 72 bp)

Alignments:
  Alignment for path 1:

    +ACC1:100-150  (1-51)   100%
    +ACC1:200-180  (52-72)   100%

"""

GMAP_RECORD_ACC2 = """\
>ACC2
Paths (1):
  Path 1: query 1..21 (21 bp) => genome ACC2:60..80 (21 bp)
    Genomic pos: ACC2:60..80 (- strand)
    Accessions: ACC2:60..80 (out of 900 bp)

Alignments:
  Alignment for path 1:

    -ACC2:60-80  (1-21)   100%

"""

GMAP_RECORD_MULTI = """\
>MULTI two hits
Paths (2):
  Path 1: query 1..50 (50 bp) => genome chr1:1..50 (50 bp)
    Genomic pos: chr1:1..50 (+ strand)
    Accessions: chr1:1..50 (out of 1000 bp)
  Path 2: query 1..50 (50 bp) => genome chr2:1..50 (50 bp)
    Genomic pos: chr2:1..50 (+ strand)
    Accessions: chr2:1..50 (out of 1000 bp)

Alignments:
  Alignment for path 1:

    +chr1:1-50  (1-50)   100%

  Alignment for path 2:

    +chr2:1-50  (1-50)   100%

"""

# The 'Alignments:' line (line 6) comes before any 'Accessions:' line.
GMAP_RECORD_NO_ACCESSION = """\
>BROKEN
Paths (1):
  Path 1: query 1..10 (10 bp) => genome X:1..10 (10 bp)
    Genomic pos: X:1..10 (- strand)

Alignments:
  Alignment for path 1:

    -X:1-10  (1-10)   100%
"""

PSL_HEADER = """\
psLayout version 3

match\tmis- \trep. \tN's\tQ gap\tQ gap\tT gap\tT gap\tstrand\tQ        \tQ   \tQ    \tQ  \tT        \tT   \tT    \tT  \tblock\tblockSizes \tqStarts\t tStarts
     \tmatch\tmatch\t   \tcount\tbases\tcount\tbases\t      \tname     \tsize\tstart\tend\tname     \tsize\tstart\tend\tcount
---------------------------------------------------------------------------------------------------------------------------------------------------------------
"""

PSL_LINE_CHR1 = "50\t0\t0\t0\t0\t0\t1\t100\t+\tq1\t50\t0\t50\tchr1\t10000\t999\t1149\t2\t20,30,\t0,20,\t999,1119,\n"
PSL_LINE_CHR1_MISMATCHES = "47\t3\t0\t0\t0\t0\t0\t0\t-\tq2\t50\t0\t50\tchr1\t10000\t4999\t5049\t1\t50,\t0,\t4999,\n"

ENCODE_LINE_CODING = "NM_1\tchr2\t-\t99\t600\t149\t450\t3\t99,299,499,\t200,400,600,\t0\tGENE1\tcmpl\tcmpl\t0,0,0,\n"
ENCODE_LINE_NONCODING = "NR_2\tchr2\t+\t999\t1500\t1500\t1500\t1\t999,\t1500,\t0\tGENE2\tnone\tnone\t-1,\n"
