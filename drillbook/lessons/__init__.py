"""Worked solutions: quizzes, basics, enums, strings, errors, hashmaps, structs, iterators, traits and pointers."""