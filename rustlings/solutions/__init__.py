"""Worked solutions to a number of the exercises."""