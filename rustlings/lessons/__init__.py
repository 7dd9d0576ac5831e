"""Worked Python solutions for a selection of the exercises."""