"""
Curated telomeric repeat motifs per clade.

Data are modified from "A telomeric repeat database"
(https://github.com/tolkit/a-telomeric-repeat-database). Each entry is a
(clade, motifs) pair; motifs are listed in curation order. Keep the table
sorted by clade name. Adding a clade is a change to this table, not a
runtime operation.

Author: Kevin R. Roy
"""

from typing import List, Tuple

SOURCE_NAME = "A telomeric repeat database"
SOURCE_URL = "https://github.com/tolkit/a-telomeric-repeat-database"

PROVENANCE_FOOTER = (
    f"This table is modified from \"{SOURCE_NAME}\"\n"
    f"{SOURCE_URL}"
)

CLADE_MOTIFS: List[Tuple[str, List[str]]] = [
    ("Accipitriformes", ["AACCCT"]),
    ("Actiniaria", ["AACCCT"]),
    ("Agaricales", ["AAACCCT"]),
    ("Alismatales", ["AAACCCT"]),
    ("Amphilepidida", ["AACCCT"]),
    ("Anura", ["AACCCT"]),
    ("Apiales", ["AAACCCT"]),
    ("Aplousobranchia", ["AACCCT"]),
    ("Aquifoliales", ["AAACCCT"]),
    ("Araneae", ["AAAGC", "AATAT", "AACAT", "ACATG", "AACTTGT", "ACTAT"]),
    ("Artiodactyla", ["AACCCT"]),
    ("Asparagales", ["AACCGAGCCCAT", "AACCCT"]),
    ("Asterales", ["AACCCTG", "AAACCCT"]),
    ("Atheriniformes", ["ACCAG"]),
    ("Balanomorpha", ["AACCT"]),
    ("Boraginales", ["AAACCCT"]),
    ("Brassicales", ["AAACCCT"]),
    ("Buxales", ["AAACCCT"]),
    ("Camarodonta", ["AACCCT"]),
    ("Caprimulgiformes", ["AACCCT"]),
    ("Carcharhiniformes", ["AACCCT"]),
    ("Cardiida", ["AACCCT"]),
    ("Carnivora", ["AACCCT"]),
    ("Caryophyllales", ["AAACCCT"]),
    ("Celastrales", ["AAACCCT"]),
    ("Chaetocerotales", ["ACCCT"]),
    ("Cheilostomatida", ["AAACCCC", "ACAGT", "AAGTCT"]),
    ("Chiroptera", ["AACCCT"]),
    ("Chitonida", ["AACCCT"]),
    ("Chlamydomonadales", ["AACCCT", "AAGGATGGAC"]),
    ("Coleoptera", [
        "AGATATAT", "AACTCC", "AACAT", "AAAGGAC", "AGGATG", "ACTCTG", "AAAAATAC",
        "AACCT", "AAGTAATC", "ACAGACTG", "AAGTC", "ACTATG", "AAATAACT", "AACCCAGACCT",
        "AAGACAGAC", "AAATAATT", "AAAAATTC", "ACCTG", "AAGTCG", "AACAGACCCG",
        "AAAGGTCACC", "AACCC",
    ]),
    ("Comatulida", ["AACCCT"]),
    ("Crassiclitellata", ["AAGGAC", "AACCCT", "AACTC"]),
    ("Cucurbitales", ["AAACCCT"]),
    ("Cypriniformes", ["AACCCT"]),
    ("Decapoda", ["AACCT"]),
    ("Dioctophymatida", ["ACGATG"]),
    ("Dipsacales", ["AAACCCT"]),
    ("Ericales", ["AAGCATT", "AAGCATC", "AAACCCT"]),
    ("Eucoccidiorida", ["AAACCCT", "AAGGAGGAGACAAT"]),
    ("Euglenales", ["AACCCT"]),
    ("Eulipotyphla", ["AACCCT"]),
    ("Fabales", ["AACCT", "AAACCCT"]),
    ("Fagales", ["AAACCCT"]),
    ("Forcipulatida", ["AACCCT"]),
    ("Fucales", ["AACCCT", "ACACT"]),
    ("Gentianales", ["AAACCCT"]),
    ("Geophilomorpha", ["AACCT"]),
    ("Geraniales", ["AACCCT", "AAACCCT"]),
    ("Gigartinales", ["ACAGGCGTGCCC"]),
    ("Glomerida", ["AACCT"]),
    ("Hemiptera", [
        "AATAC", "AACCATCCCT", "AACCTACCT", "AACACTCCCT", "AACCT", "AAGAAT",
        "AAACCTATCC", "AAGAATATAGAAT", "AAAATTGTTGATGGAGATCATAC", "ACAGAGAGGC",
        "AAATAACT", "AAACCACCCT", "ACCGAG", "AATATAG",
    ]),
    ("Heteronemertea", ["AACCCT"]),
    ("Hirudinida", ["AACACGAGATG"]),
    ("Hymenoptera", [
        "AACGAC", "ACTCT", "AATAT", "AACCCTGACGC", "AACGAGTCG", "AGAGAT", "ACACGC",
        "AACTCACT", "ACGATG", "ACCAGTG", "ACATCGT", "AAAAT", "ACTCTG", "AACCT", "AACCC",
        "AACCCGAACCT", "ACAGAG", "AAAGGC", "AACGTAT", "AACCCAGACCT", "AACCCAGACCC",
        "AGCCG", "ACCTG", "AACCCCAACCT", "AAAACG", "AAACCTAACCC", "AACCCAGACGC",
        "AAACG", "AACCCT", "AGGGATATC", "AAACAC", "AAAAAC", "AAACCTAACC", "AAACGAGTC",
    ]),
    ("Hypnales", ["AACAG", "AAACCCT"]),
    ("Isochrysidales", ["AACCCT"]),
    ("Isopoda", ["AGGATG"]),
    ("Lamiales", ["AACCCTAAT", "AAACCCT"]),
    ("Lepidoptera", [
        "AACCATCCCT", "ACTCTG", "AACCT", "AAGACGGTAAGTGTGTATGTATGT", "AACGTGAT",
        "ACATC", "AACTCG", "AAACCACCCT", "ACACCT",
    ]),
    ("Liliales", ["AAACCCT"]),
    ("Lithobiomorpha", ["AACCT", "AAAGTCG"]),
    ("Littorinimorpha", ["AACCCT"]),
    ("Lunulariales", ["AAACCCT"]),
    ("Lycopodiales", ["AAACCCT"]),
    ("Malpighiales", ["AACCCT", "AAACCCT"]),
    ("Malvales", ["AAACCCT"]),
    ("Megaloptera", ["AACCT"]),
    ("Myrtales", ["AAACCCT"]),
    ("Neuroptera", ["AACCC"]),
    ("Nudibranchia", ["AAACAC"]),
    ("Odonata", ["AGCCATCGCCAT", "AACCC", "AGATC"]),
    ("Opiliones", ["ACGAG"]),
    ("Orthoptera", ["AACCT"]),
    ("Ostreida", ["AACCCT"]),
    ("Palmariales", ["ACACTGAGT"]),
    ("Pectinida", ["AACCCT"]),
    ("Pelecaniformes", ["AACCCT"]),
    ("Perciformes", ["AACCCT"]),
    ("Phlebobranchia", ["AACCCT"]),
    ("Phyllodocida", ["AACCCT"]),
    ("Plecoptera", ["AACCT"]),
    ("Poales", ["AAACCCT"]),
    ("Polytrichales", ["AACCT"]),
    ("Primates", ["AATGG"]),
    ("Procellariiformes", ["AACCCT"]),
    ("Pyrenomonadales", ["AAACCCT"]),
    ("Ranunculales", ["AAAACCCTACCCG", "AACCCTG", "AAACCG", "AAACCCT", "AACCCCG"]),
    ("Raphidioptera", ["AAGACAGT"]),
    ("Rhabditida", ["AAGCCT"]),
    ("Rodentia", ["AACCCT"]),
    ("Rosales", ["AAACCCT"]),
    ("Sabellida", ["AACCCT"]),
    ("Salmoniformes", ["AACCCT"]),
    ("Sapindales", ["AAACCCT"]),
    ("Scombriformes", ["AACCCT"]),
    ("Scorpiones", ["AACCT"]),
    ("Solanales", ["AACCCTG", "AAACCCT"]),
    ("Sphagnales", ["AAACCT"]),
    ("Stolidobranchia", ["AACCCT"]),
    ("Symphypleona", ["AAACTTGGAATT"]),
    ("Trichoptera", ["AATGACAGCG", "AACCT"]),
    ("Trochida", ["AACATG", "AACCCT"]),
    ("Venerida", ["AACCCT"]),
]
