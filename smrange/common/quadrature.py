''' Fixed-order Gauss-Legendre quadrature

    The rules are symmetric, so only the positive abscissas and their weights
    are tabulated. Integration over [lo, hi] maps the rule onto the interval
    through its center and half-width and evaluates the integrand at
    center +/- halfwidth*x for each tabulated x.
'''

import numpy as np


class GaussLegendre:
    ''' Symmetric Gauss-Legendre rule

        Args:
            nodes (array): Positive abscissas on (0, 1), length n/2
            weights (array): Weights for each abscissa, length n/2
    '''
    def __init__(self, nodes, weights):
        self.nodes = np.array(nodes, dtype=float)
        self.weights = np.array(weights, dtype=float)
        if self.nodes.shape != self.weights.shape:
            raise ValueError('nodes and weights must have the same length')
        self.nodes.setflags(write=False)
        self.weights.setflags(write=False)

    def __repr__(self):
        return f'<GaussLegendre: {self.order} nodes>'

    @property
    def order(self):
        ''' Number of nodes in the full rule '''
        return 2 * len(self.nodes)

    def abscissas(self, lo, hi):
        ''' Get the lower and upper sets of evaluation points for [lo, hi] '''
        center = 0.5 * (lo + hi)
        halfwidth = 0.5 * (hi - lo)
        x = halfwidth * self.nodes
        return center - x, center + x

    def integrate(self, func, lo, hi):
        ''' Integrate func over [lo, hi].

            Args:
                func (callable): Integrand. Called twice with an array of
                    n/2 points and must return an array of the same shape.
                lo (float): Lower integration limit
                hi (float): Upper integration limit

            Returns:
                integral (float): Quadrature estimate of the integral
        '''
        xlo, xhi = self.abscissas(lo, hi)
        total = np.dot(self.weights, func(xlo) + func(xhi))
        return float(0.5 * (hi - lo) * total)


GL20 = GaussLegendre(
    nodes=[
        0.993128599185094924786122388471320278,
        0.963971927277913791267666131197277222,
        0.912234428251325905867752441203298113,
        0.839116971822218823394529061701520685,
        0.746331906460150792614305070355641590,
        0.636053680726515025452836696226285937,
        0.510867001950827098004364050955250998,
        0.373706088715419560672548177024927237,
        0.227785851141645078080496195368574625,
        0.0765265211334973337546404093988382110],
    weights=[
        0.0176140071391521183118619623518528164,
        0.0406014298003869413310399522749321099,
        0.0626720483341090635695065351870416064,
        0.0832767415767047487247581432220462061,
        0.101930119817240435036750135480349876,
        0.118194531961518417312377377711382287,
        0.131688638449176626898494499748163135,
        0.142096109318382051329298325067164933,
        0.149172986472603746787828737001969437,
        0.152753387130725850698084331955097593])


GL40 = GaussLegendre(
    nodes=[
        0.998237709710559200349622702420586492,
        0.990726238699457006453054352221372155,
        0.977259949983774262663370283712903807,
        0.957916819213791655804540999452759285,
        0.932812808278676533360852166845205716,
        0.902098806968874296728253330868493104,
        0.865959503212259503820781808354619964,
        0.824612230833311663196320230666098774,
        0.778305651426519387694971545506494848,
        0.727318255189927103280996451754930549,
        0.671956684614179548379354514961494110,
        0.612553889667980237952612450230694877,
        0.549467125095128202075931305529517970,
        0.483075801686178712908566574244823005,
        0.413779204371605001524879745803713683,
        0.341994090825758473007492481179194310,
        0.268152185007253681141184344808596183,
        0.192697580701371099715516852065149895,
        0.116084070675255208483451284408024114,
        0.0387724175060508219331934440246232947],
    weights=[
        0.00452127709853319125847173287818533273,
        0.0104982845311528136147421710672796524,
        0.0164210583819078887128634848823639273,
        0.0222458491941669572615043241842085732,
        0.0279370069800234010984891575077210773,
        0.0334601952825478473926781830864108490,
        0.0387821679744720176399720312904461623,
        0.0438709081856732719916746860417154958,
        0.0486958076350722320614341604481463881,
        0.0532278469839368243549964797722605046,
        0.0574397690993915513666177309104259856,
        0.0613062424929289391665379964083985959,
        0.0648040134566010380745545295667527300,
        0.0679120458152339038256901082319239860,
        0.0706116473912867796954836308552868324,
        0.0728865823958040590605106834425178359,
        0.0747231690579682642001893362613246732,
        0.0761103619006262423715580759224948230,
        0.0770398181642479655883075342838102485,
        0.0775059479784248112637239629583263270])
