"""Export of graphs to the DOT format."""