"""One module per puzzle day, each with solve_1, solve_2 and main."""