"""
Constants and default values for ontology hierarchy conversion.
"""

# Sentinel for "no limit" on max depth and "grouping disabled" on min size
UNLIMITED = -1

# Annotation property used for synonyms in EFO
DEFAULT_SYNONYM_URI = "http://www.ebi.ac.uk/efo/alternative_term"

# Classes under this one are skipped by the reasoned loader
OBSOLETE_CLASS_URI = "http://www.geneontology.org/formats/oboInOwl#ObsoleteClass"

# First field of the optional header row in a counts CSV
CSV_HEADER_MARKER = "URI"

# Name given to the node that replaces children below the minimum size
AGGREGATE_NAME_PREFIX = "Other "

# Upper bound for the automatically derived minimum subtree size
ONE_PERCENT_MAX_MIN_SIZE = 500

# ZOOMA aggregation service
ZOOMA_QUERY_URL = "http://www.ebi.ac.uk/fgpt/zooma/v2/api/query"
ZOOMA_DEFAULT_DATASOURCE = "http://www.genome.gov/gwastudies"

ZOOMA_COUNT_QUERY = """PREFIX rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>
PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>
PREFIX owl: <http://www.w3.org/2002/07/owl#>
PREFIX dc: <http://purl.org/dc/elements/1.1/>
PREFIX obo: <http://purl.obolibrary.org/obo/>
PREFIX efo: <http://www.ebi.ac.uk/efo/>
PREFIX zoomaresource: <http://rdf.ebi.ac.uk/resource/zooma/>
PREFIX zoomaterms: <http://rdf.ebi.ac.uk/terms/zooma/>
PREFIX oac: <http://www.openannotation.org/ns/>

SELECT ?semantictag (count(DISTINCT ?annotationid) as ?datapoints) WHERE {
  ?annotationid rdf:type oac:DataAnnotation ;
                oac:hasBody ?semantictag .
  ?semantictag rdf:type oac:SemanticTag .
  ?annotationid dc:source ?source .
  FILTER (?source = <{datasource}>) .
}
GROUP BY ?semantictag
ORDER BY DESC(?datapoints)
"""
