"""Map reading and checks, game rules, and the so_long command."""